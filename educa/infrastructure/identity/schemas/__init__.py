from .learner_schemas import (
    LearnerListResponse,
    LearnerLoginResponse,
    LearnerRegisterRequest,
    LearnerResponse,
)

__all__ = [
    "LearnerListResponse",
    "LearnerLoginResponse",
    "LearnerRegisterRequest",
    "LearnerResponse",
]
