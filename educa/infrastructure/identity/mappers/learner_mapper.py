"""Mapper for Learner ORM ↔ Domain conversion."""

from educa.domain.common.value_objects.ids import CourseId, LearnerId
from educa.domain.identity.entities.learner import Learner
from educa.models import Learner as LearnerORM


class LearnerMapper:
    """Mapper for Learner ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: LearnerORM) -> Learner:
        """Convert ORM model to domain entity."""
        return Learner.create_with_id(
            id=LearnerId(orm_model.id),
            full_name=orm_model.full_name,
            email=orm_model.email,
            hashed_password=orm_model.hashed_password,
            progress=orm_model.progress,
            enrolled_course_ids={CourseId(course.id) for course in orm_model.courses},
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Learner, orm_model: LearnerORM | None = None) -> LearnerORM:
        """
        Convert domain entity to ORM model.

        Enrollments are not copied; they are written through
        LearnerRepository.add_enrollment so concurrent enrollments never
        overwrite each other.
        """
        if orm_model:
            # Update existing
            orm_model.full_name = domain_entity.full_name
            orm_model.email = domain_entity.email
            orm_model.hashed_password = domain_entity.hashed_password
            orm_model.progress = domain_entity.progress
            return orm_model

        # Create new
        return LearnerORM(
            id=domain_entity.id.value if not domain_entity.id.is_transient else None,
            full_name=domain_entity.full_name,
            email=domain_entity.email,
            hashed_password=domain_entity.hashed_password,
            progress=domain_entity.progress,
        )
