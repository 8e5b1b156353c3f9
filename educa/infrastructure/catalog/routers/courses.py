"""API routes for the course catalog."""

import logging

from fastapi import APIRouter, Depends, status

from educa.application.catalog.use_cases.catalog_use_case import CatalogUseCase
from educa.core import container
from educa.domain.catalog.entities.course import Course
from educa.infrastructure.catalog.schemas import (
    CatalogResetRequest,
    CourseCreateRequest,
    CourseLessonUpdateRequest,
    CourseResponse,
    CoursesListResponse,
)
from educa.infrastructure.common.di import inject_use_case
from educa.infrastructure.identity.dependencies import AdminRequired

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=CoursesListResponse)
def list_courses(
    use_case: CatalogUseCase = Depends(inject_use_case(container.catalog_use_case)),
) -> CoursesListResponse:
    """List the whole catalog."""
    return CoursesListResponse(
        courses=[CourseResponse.from_entity(course) for course in use_case.list_courses()]
    )


@router.get("/featured", response_model=CourseResponse)
def get_featured_course(
    use_case: CatalogUseCase = Depends(inject_use_case(container.catalog_use_case)),
) -> CourseResponse:
    """Get the first course of the catalog. 404 when the catalog is empty."""
    return CourseResponse.from_entity(use_case.get_featured_course())


@router.get("/{course_id}", response_model=CourseResponse)
def get_course(
    course_id: int,
    use_case: CatalogUseCase = Depends(inject_use_case(container.catalog_use_case)),
) -> CourseResponse:
    return CourseResponse.from_entity(use_case.get_course(course_id))


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
def create_course(
    request: CourseCreateRequest,
    _admin: AdminRequired,
    use_case: CatalogUseCase = Depends(inject_use_case(container.catalog_use_case)),
) -> CourseResponse:
    """Create a single course (administrators only)."""
    course = use_case.create_course(**request.model_dump())
    return CourseResponse.from_entity(course)


@router.put("/{course_id}/lesson", response_model=CourseResponse)
def update_course_lesson(
    course_id: int,
    request: CourseLessonUpdateRequest,
    _admin: AdminRequired,
    use_case: CatalogUseCase = Depends(inject_use_case(container.catalog_use_case)),
) -> CourseResponse:
    """Set or clear the lesson video of a course (administrators only)."""
    course = use_case.update_lesson_reference(course_id, request.lesson_reference)
    return CourseResponse.from_entity(course)


@router.post("/reset", response_model=CoursesListResponse)
def reset_catalog(
    admin: AdminRequired,
    request: CatalogResetRequest | None = None,
    use_case: CatalogUseCase = Depends(inject_use_case(container.catalog_use_case)),
) -> CoursesListResponse:
    """
    Replace the whole catalog (administrators only).

    Without a body, the demo catalog is loaded. Existing enrollments are dropped.
    """
    seed = None
    if request is not None and request.courses is not None:
        seed = [Course.create(**course.model_dump()) for course in request.courses]
    courses = use_case.reset_catalog(seed)
    logger.info(f"Catalog reset by {admin.username}")
    return CoursesListResponse(courses=[CourseResponse.from_entity(course) for course in courses])
