"""Mapper for Course ORM ↔ Domain conversion."""

from educa.domain.catalog.entities.course import Course
from educa.domain.common.value_objects.ids import CourseId
from educa.models import Course as CourseORM


class CourseMapper:
    """Mapper for Course ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: CourseORM) -> Course:
        """Convert ORM model to domain entity."""
        return Course.create_with_id(
            id=CourseId(orm_model.id),
            title=orm_model.title,
            description=orm_model.description,
            instructor=orm_model.instructor,
            price=orm_model.price,
            lesson_reference=orm_model.lesson_reference,
            level=orm_model.level,
            thumbnail=orm_model.thumbnail,
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: Course, orm_model: CourseORM | None = None) -> CourseORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.title = domain_entity.title
            orm_model.description = domain_entity.description
            orm_model.instructor = domain_entity.instructor
            orm_model.price = domain_entity.price
            orm_model.lesson_reference = domain_entity.lesson_reference
            orm_model.level = domain_entity.level
            orm_model.thumbnail = domain_entity.thumbnail
            return orm_model

        # Create new
        return CourseORM(
            id=domain_entity.id.value if not domain_entity.id.is_transient else None,
            title=domain_entity.title,
            description=domain_entity.description,
            instructor=domain_entity.instructor,
            price=domain_entity.price,
            lesson_reference=domain_entity.lesson_reference,
            level=domain_entity.level,
            thumbnail=domain_entity.thumbnail,
        )
