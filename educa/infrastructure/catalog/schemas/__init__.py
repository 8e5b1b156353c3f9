from .course_schemas import (
    CatalogResetRequest,
    CourseCreateRequest,
    CourseLessonUpdateRequest,
    CourseResponse,
    CoursesListResponse,
)

__all__ = [
    "CatalogResetRequest",
    "CourseCreateRequest",
    "CourseLessonUpdateRequest",
    "CourseResponse",
    "CoursesListResponse",
]
