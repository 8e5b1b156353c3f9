"""Repository for Course domain entities."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from educa.domain.catalog.entities.course import Course
from educa.domain.common.value_objects.ids import CourseId
from educa.infrastructure.catalog.mappers.course_mapper import CourseMapper
from educa.infrastructure.common.storage import translate_storage_errors
from educa.models import Course as CourseORM
from educa.models import learner_courses

logger = logging.getLogger(__name__)


class CourseRepository:
    """Repository for Course domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CourseMapper()

    @translate_storage_errors
    def find_by_id(self, course_id: CourseId) -> Course | None:
        """
        Find a course by ID.

        Returns:
            Course entity if found, None otherwise
        """
        orm_model = self.db.get(CourseORM, course_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    @translate_storage_errors
    def find_by_ids(self, course_ids: set[CourseId]) -> list[Course]:
        """
        Find the courses with the given IDs, ordered by ID.

        Unknown IDs are skipped.
        """
        if not course_ids:
            return []
        stmt = (
            select(CourseORM)
            .where(CourseORM.id.in_([course_id.value for course_id in course_ids]))
            .order_by(CourseORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    @translate_storage_errors
    def find_first(self) -> Course | None:
        """Return the course with the lowest ID, or None for an empty catalog."""
        stmt = select(CourseORM).order_by(CourseORM.id).limit(1)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    @translate_storage_errors
    def list_all(self) -> list[Course]:
        """List every course ordered by ID."""
        stmt = select(CourseORM).order_by(CourseORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    @translate_storage_errors
    def save(self, course: Course) -> Course:
        """
        Save a course entity (create or update).

        Returns:
            Saved course entity with database-generated values
        """
        if course.id.is_transient:
            orm_model = self.mapper.to_orm(course)
            self.db.add(orm_model)
        else:
            orm_model = self.db.get(CourseORM, course.id.value)
            if not orm_model:
                raise ValueError(f"Course {course.id.value} not found")
            self.mapper.to_orm(course, orm_model)

        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    @translate_storage_errors
    def replace_all(self, courses: list[Course]) -> list[Course]:
        """
        Delete every course and insert `courses`, in a single transaction.

        Membership rows are removed explicitly so that a reused course ID can
        never re-attach an old enrollment.

        Returns:
            The inserted courses with their new IDs, in input order
        """
        self.db.execute(delete(learner_courses))
        self.db.execute(delete(CourseORM))
        # New rows may reuse the deleted IDs; drop the stale instances first
        for stale in [obj for obj in self.db.identity_map.values() if isinstance(obj, CourseORM)]:
            self.db.expunge(stale)

        orm_models = [self.mapper.to_orm(course) for course in courses]
        for orm_model in orm_models:
            # Seed entities may carry IDs from a previous catalog
            orm_model.id = None
        self.db.add_all(orm_models)
        self.db.commit()

        for orm_model in orm_models:
            self.db.refresh(orm_model)
        logger.info(f"Replaced catalog with {len(orm_models)} courses")
        return [self.mapper.to_domain(orm) for orm in orm_models]
