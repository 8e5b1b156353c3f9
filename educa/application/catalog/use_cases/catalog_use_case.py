"""Use case for catalog operations."""

from decimal import Decimal

import structlog

from educa.application.catalog.protocols.course_repository import CourseRepositoryProtocol
from educa.domain.catalog.entities.course import Course
from educa.domain.catalog.exceptions import CatalogEmptyError, CourseNotFoundError
from educa.domain.catalog.seed import default_seed_courses
from educa.domain.common.value_objects.ids import CourseId

logger = structlog.get_logger(__name__)


class CatalogUseCase:
    """Use case for creating, querying and resetting courses."""

    def __init__(self, course_repository: CourseRepositoryProtocol) -> None:
        """Initialize use case with repository protocol."""
        self.course_repository = course_repository

    def list_courses(self) -> list[Course]:
        return self.course_repository.list_all()

    def get_course(self, course_id: int) -> Course:
        """
        Get a course by ID.

        Raises:
            CourseNotFoundError: If no course has this ID
        """
        course = self.course_repository.find_by_id(CourseId(course_id))
        if not course:
            raise CourseNotFoundError(course_id)
        return course

    def get_featured_course(self) -> Course:
        """
        Get the first course in store order.

        Only used to showcase a course; enrollment always names its course.

        Raises:
            CatalogEmptyError: If the catalog has no courses
        """
        course = self.course_repository.find_first()
        if not course:
            raise CatalogEmptyError
        return course

    def create_course(
        self,
        title: str,
        description: str = "",
        instructor: str = "",
        price: Decimal | int | float | str = 0,
        lesson_reference: str | None = None,
        level: str | None = None,
        thumbnail: str | None = None,
    ) -> Course:
        """
        Create a single course.

        Raises:
            ValidationError: If the title is empty or the price is negative
        """
        course = Course.create(
            title=title,
            description=description,
            instructor=instructor,
            price=price,
            lesson_reference=lesson_reference,
            level=level,
            thumbnail=thumbnail,
        )
        course = self.course_repository.save(course)

        logger.info("course_created", course_id=course.id.value, title=course.title)
        return course

    def update_lesson_reference(self, course_id: int, reference: str | None) -> Course:
        """
        Set the playable lesson pointer of a course.

        Raises:
            CourseNotFoundError: If no course has this ID
        """
        course = self.get_course(course_id)
        course.update_lesson_reference(reference)
        course = self.course_repository.save(course)

        logger.info("course_lesson_updated", course_id=course_id)
        return course

    def reset_catalog(self, seed_courses: list[Course] | None = None) -> list[Course]:
        """
        Replace the whole catalog with a seed set.

        Deletion and insertion happen in one transaction, so readers never see
        an empty catalog in between. Enrollments pointing at removed courses
        are dropped with them.

        Args:
            seed_courses: Courses to insert; the demo catalog when omitted
        """
        seed = default_seed_courses() if seed_courses is None else seed_courses
        courses = self.course_repository.replace_all(seed)

        logger.info("catalog_reset", course_count=len(courses))
        return courses
