"""API routes for enrollment and progress."""

from fastapi import APIRouter, Depends

from educa.application.enrollment.use_cases.enrollment_use_case import EnrollmentUseCase
from educa.core import container
from educa.infrastructure.catalog.schemas import CourseResponse, CoursesListResponse
from educa.infrastructure.common.di import inject_use_case
from educa.infrastructure.enrollment.schemas import EnrollmentRequest, ProgressUpdateRequest
from educa.infrastructure.identity.dependencies import AdminRequired, CurrentLearner
from educa.infrastructure.identity.schemas import LearnerResponse

router = APIRouter(prefix="/learners", tags=["enrollments"])


@router.get("/me/courses", response_model=CoursesListResponse)
def get_my_courses(
    current_learner: CurrentLearner,
    use_case: EnrollmentUseCase = Depends(inject_use_case(container.enrollment_use_case)),
) -> CoursesListResponse:
    """List the courses the authenticated learner is enrolled in."""
    courses = use_case.list_enrolled_courses(current_learner.id.value)
    return CoursesListResponse(courses=[CourseResponse.from_entity(course) for course in courses])


@router.get("/{learner_id}/courses", response_model=CoursesListResponse)
def get_learner_courses(
    learner_id: int,
    _admin: AdminRequired,
    use_case: EnrollmentUseCase = Depends(inject_use_case(container.enrollment_use_case)),
) -> CoursesListResponse:
    """List a learner's courses (administrators only)."""
    courses = use_case.list_enrolled_courses(learner_id)
    return CoursesListResponse(courses=[CourseResponse.from_entity(course) for course in courses])


@router.post("/{learner_id}/enrollments", response_model=LearnerResponse)
def enroll_learner(
    learner_id: int,
    request: EnrollmentRequest,
    _admin: AdminRequired,
    use_case: EnrollmentUseCase = Depends(inject_use_case(container.enrollment_use_case)),
) -> LearnerResponse:
    """
    Enroll a learner in a course (administrators only).

    Repeating the request is harmless: the learner stays enrolled once.
    """
    learner = use_case.enroll(learner_id, request.course_id)
    return LearnerResponse.from_entity(learner)


@router.put("/{learner_id}/progress", response_model=LearnerResponse)
def set_learner_progress(
    learner_id: int,
    request: ProgressUpdateRequest,
    _admin: AdminRequired,
    use_case: EnrollmentUseCase = Depends(inject_use_case(container.enrollment_use_case)),
) -> LearnerResponse:
    """Overwrite a learner's progress (administrators only). 400 outside 0-100."""
    learner = use_case.set_progress(learner_id, request.progress)
    return LearnerResponse.from_entity(learner)
