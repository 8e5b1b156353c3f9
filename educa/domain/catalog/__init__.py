"""Catalog domain layer."""

from educa.domain.catalog.entities.course import Course
from educa.domain.catalog.exceptions import CatalogEmptyError, CourseNotFoundError

__all__ = [
    "CatalogEmptyError",
    "Course",
    "CourseNotFoundError",
]
