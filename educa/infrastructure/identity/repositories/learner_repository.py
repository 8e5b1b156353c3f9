"""Repository for Learner domain entities."""

import logging

from sqlalchemy import func, insert, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from educa.domain.common.value_objects.ids import CourseId, LearnerId
from educa.domain.identity.entities.learner import Learner
from educa.domain.identity.exceptions import EmailAlreadyExistsError
from educa.infrastructure.common.storage import translate_storage_errors
from educa.infrastructure.identity.mappers.learner_mapper import LearnerMapper
from educa.models import Learner as LearnerORM
from educa.models import learner_courses

logger = logging.getLogger(__name__)


def _like_pattern(query: str) -> str:
    """Build a LIKE pattern matching `query` anywhere, with wildcards escaped."""
    escaped = query.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class LearnerRepository:
    """Repository for Learner domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = LearnerMapper()

    @translate_storage_errors
    def find_by_id(self, learner_id: LearnerId) -> Learner | None:
        """
        Find a learner by ID.

        Args:
            learner_id: The learner ID

        Returns:
            Learner entity if found, None otherwise
        """
        orm_model = self.db.get(LearnerORM, learner_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    @translate_storage_errors
    def find_by_email(self, email: str) -> Learner | None:
        """
        Find a learner by email, ignoring case.

        Args:
            email: The learner's email address

        Returns:
            Learner entity if found, None otherwise
        """
        stmt = select(LearnerORM).where(func.lower(LearnerORM.email) == email.strip().lower())
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    @translate_storage_errors
    def list_all(self, query: str | None = None) -> list[Learner]:
        """
        List learners ordered by ID.

        Args:
            query: Optional case-insensitive substring of the name or email

        Returns:
            List of learner entities
        """
        stmt = select(LearnerORM).order_by(LearnerORM.id)
        if query:
            pattern = _like_pattern(query.strip())
            stmt = stmt.where(
                or_(
                    func.lower(LearnerORM.full_name).like(pattern, escape="\\"),
                    func.lower(LearnerORM.email).like(pattern, escape="\\"),
                )
            )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    @translate_storage_errors
    def save(self, learner: Learner) -> Learner:
        """
        Save a learner entity (create or update).

        Args:
            learner: The learner entity to save

        Returns:
            Saved learner entity with database-generated values

        Raises:
            EmailAlreadyExistsError: If email is already registered
        """
        if learner.id.is_transient:
            orm_model = self.mapper.to_orm(learner)
            self.db.add(orm_model)
        else:
            orm_model = self.db.get(LearnerORM, learner.id.value)
            if not orm_model:
                raise ValueError(f"Learner with id {learner.id.value} not found")
            self.mapper.to_orm(learner, orm_model)

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            # Check if it's a unique constraint violation on email
            if "email" in str(e.orig):
                raise EmailAlreadyExistsError(learner.email) from e
            raise

        self.db.refresh(orm_model)
        logger.info(f"Saved learner {orm_model.id} ({orm_model.email})")
        return self.mapper.to_domain(orm_model)

    def _enrollment_exists(self, learner_id: LearnerId, course_id: CourseId) -> bool:
        stmt = select(learner_courses.c.learner_id).where(
            learner_courses.c.learner_id == learner_id.value,
            learner_courses.c.course_id == course_id.value,
        )
        return self.db.execute(stmt).first() is not None

    @translate_storage_errors
    def add_enrollment(self, learner_id: LearnerId, course_id: CourseId) -> bool:
        """
        Add a course to a learner's enrollment set.

        The (learner, course) pair is the primary key of the membership table,
        so a concurrent insert of the same pair loses with an IntegrityError
        and is reported as already enrolled.

        Returns:
            True if a membership row was inserted, False if it already existed
        """
        if self._enrollment_exists(learner_id, course_id):
            return False

        try:
            self.db.execute(
                insert(learner_courses).values(
                    learner_id=learner_id.value, course_id=course_id.value
                )
            )
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            if self._enrollment_exists(learner_id, course_id):
                return False
            raise

        logger.info(f"Enrolled learner {learner_id.value} in course {course_id.value}")
        return True

    @translate_storage_errors
    def delete(self, learner_id: LearnerId) -> bool:
        """
        Delete a learner and its membership rows. Courses are untouched.

        Returns:
            True if deleted, False if not found
        """
        orm_model = self.db.get(LearnerORM, learner_id.value)
        if not orm_model:
            return False

        self.db.delete(orm_model)
        self.db.commit()
        logger.info(f"Deleted learner {learner_id.value}")
        return True
