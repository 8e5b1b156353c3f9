"""API routes for learner accounts."""

import logging

from fastapi import APIRouter, Depends, Query, status

from educa.application.identity.use_cases.learner_directory_use_case import (
    LearnerDirectoryUseCase,
)
from educa.application.identity.use_cases.learner_registration_use_case import (
    LearnerRegistrationUseCase,
)
from educa.core import container
from educa.infrastructure.common.di import inject_use_case
from educa.infrastructure.common.schemas import SuccessResponse
from educa.infrastructure.identity.dependencies import AdminRequired, CurrentLearner
from educa.infrastructure.identity.schemas import (
    LearnerListResponse,
    LearnerRegisterRequest,
    LearnerResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/learners", tags=["learners"])


@router.post("/register", response_model=LearnerResponse, status_code=status.HTTP_201_CREATED)
def register_learner(
    request: LearnerRegisterRequest,
    use_case: LearnerRegistrationUseCase = Depends(
        inject_use_case(container.learner_registration_use_case)
    ),
) -> LearnerResponse:
    """
    Register a new learner account.

    The new learner starts with progress 0 and no enrollments.
    """
    learner = use_case.register_learner(
        full_name=request.full_name, email=str(request.email), password=request.password
    )
    return LearnerResponse.from_entity(learner)


@router.get("/me", response_model=LearnerResponse)
def get_me(current_learner: CurrentLearner) -> LearnerResponse:
    """Get the authenticated learner's profile."""
    return LearnerResponse.from_entity(current_learner)


@router.get("", response_model=LearnerListResponse)
def list_learners(
    _admin: AdminRequired,
    q: str | None = Query(None, description="Case-insensitive name or email substring"),
    use_case: LearnerDirectoryUseCase = Depends(
        inject_use_case(container.learner_directory_use_case)
    ),
) -> LearnerListResponse:
    """List every learner, optionally filtered (administrators only)."""
    learners = use_case.list_learners(q)
    return LearnerListResponse(
        learners=[LearnerResponse.from_entity(learner) for learner in learners],
        total=len(learners),
    )


@router.get("/lookup", response_model=LearnerResponse)
def find_learner_by_email(
    _admin: AdminRequired,
    email: str = Query(..., min_length=1, description="Email address, any case"),
    use_case: LearnerDirectoryUseCase = Depends(
        inject_use_case(container.learner_directory_use_case)
    ),
) -> LearnerResponse:
    """Find a learner by email (administrators only)."""
    return LearnerResponse.from_entity(use_case.find_by_email(email))


@router.get("/{learner_id}", response_model=LearnerResponse)
def get_learner(
    learner_id: int,
    _admin: AdminRequired,
    use_case: LearnerDirectoryUseCase = Depends(
        inject_use_case(container.learner_directory_use_case)
    ),
) -> LearnerResponse:
    """Get a learner by ID (administrators only)."""
    return LearnerResponse.from_entity(use_case.get_learner(learner_id))


@router.delete("/{learner_id}", response_model=SuccessResponse)
def delete_learner(
    learner_id: int,
    _admin: AdminRequired,
    use_case: LearnerDirectoryUseCase = Depends(
        inject_use_case(container.learner_directory_use_case)
    ),
) -> SuccessResponse:
    """
    Delete a learner (administrators only).

    Deleting an unknown learner also succeeds.
    """
    use_case.delete_learner(learner_id)
    return SuccessResponse(success=True, message="Learner deleted successfully")
