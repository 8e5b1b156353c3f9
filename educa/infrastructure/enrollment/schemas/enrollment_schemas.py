"""Pydantic schemas for enrollment and progress requests."""

from pydantic import BaseModel, Field


class EnrollmentRequest(BaseModel):
    """Schema for enrolling a learner in a course."""

    course_id: int = Field(..., description="Course to enroll in")


class ProgressUpdateRequest(BaseModel):
    """Schema for overwriting a learner's progress. Range is checked by the domain."""

    progress: int = Field(..., description="Completion percentage, 0 to 100")
