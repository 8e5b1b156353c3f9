"""Mapper for Administrator ORM ↔ Domain conversion."""

from educa.domain.common.value_objects.ids import AdministratorId
from educa.domain.identity.entities.administrator import Administrator
from educa.models import Administrator as AdministratorORM


class AdministratorMapper:
    """Mapper for Administrator ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: AdministratorORM) -> Administrator:
        return Administrator(
            id=AdministratorId(orm_model.id),
            username=orm_model.username,
            hashed_password=orm_model.hashed_password,
        )

    def to_orm(
        self, domain_entity: Administrator, orm_model: AdministratorORM | None = None
    ) -> AdministratorORM:
        if orm_model:
            orm_model.username = domain_entity.username
            orm_model.hashed_password = domain_entity.hashed_password
            return orm_model

        return AdministratorORM(
            username=domain_entity.username,
            hashed_password=domain_entity.hashed_password,
        )
