"""Pydantic schemas for learner API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from educa.domain.identity.entities.learner import Learner


class LearnerRegisterRequest(BaseModel):
    """Schema for registering a learner."""

    full_name: str = Field(..., description="Learner's full name")
    email: EmailStr = Field(..., description="Learner's email address")
    password: str = Field(..., description="Plain text password, hashed before storage")


class LearnerResponse(BaseModel):
    """Schema for a learner profile. Never includes the password hash."""

    id: int
    full_name: str
    email: str
    progress: int = Field(..., ge=0, le=100)
    enrolled_course_ids: list[int]
    created_at: datetime | None = None

    @classmethod
    def from_entity(cls, learner: Learner) -> "LearnerResponse":
        return cls(
            id=learner.id.value,
            full_name=learner.full_name,
            email=learner.email,
            progress=learner.progress,
            enrolled_course_ids=sorted(cid.value for cid in learner.enrolled_course_ids),
            created_at=learner.created_at,
        )


class LearnerListResponse(BaseModel):
    """Schema for the administrator roster."""

    learners: list[LearnerResponse] = Field(..., description="Matching learners")
    total: int = Field(..., description="Number of matching learners")


class LearnerLoginResponse(BaseModel):
    """Schema for a learner login: token plus profile."""

    access_token: str
    token_type: str
    expires_in: int
    learner: LearnerResponse
