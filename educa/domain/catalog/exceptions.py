"""Catalog domain exceptions."""

from educa.domain.common.exceptions import EntityNotFoundError


class CourseNotFoundError(EntityNotFoundError):
    """Raised when a course cannot be found."""

    def __init__(self, course_id: object) -> None:
        super().__init__("Course", course_id)


class CatalogEmptyError(EntityNotFoundError):
    """Raised when the catalog has no courses at all."""

    def __init__(self) -> None:
        super().__init__("Course", None, message="The catalog is empty")
