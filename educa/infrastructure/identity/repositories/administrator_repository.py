"""Repository for Administrator domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from educa.domain.identity.entities.administrator import Administrator
from educa.infrastructure.common.storage import translate_storage_errors
from educa.infrastructure.identity.mappers.administrator_mapper import AdministratorMapper
from educa.models import Administrator as AdministratorORM

logger = logging.getLogger(__name__)


class AdministratorRepository:
    """Repository for Administrator domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = AdministratorMapper()

    @translate_storage_errors
    def find_by_username(self, username: str) -> Administrator | None:
        stmt = select(AdministratorORM).where(AdministratorORM.username == username)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    @translate_storage_errors
    def save(self, administrator: Administrator) -> Administrator:
        if administrator.id.is_transient:
            orm_model = self.mapper.to_orm(administrator)
            self.db.add(orm_model)
        else:
            orm_model = self.db.get(AdministratorORM, administrator.id.value)
            if not orm_model:
                raise ValueError(f"Administrator with id {administrator.id.value} not found")
            self.mapper.to_orm(administrator, orm_model)

        self.db.commit()
        self.db.refresh(orm_model)
        logger.info(f"Saved administrator {orm_model.username}")
        return self.mapper.to_domain(orm_model)
