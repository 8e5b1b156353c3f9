from .enrollment_schemas import EnrollmentRequest, ProgressUpdateRequest

__all__ = [
    "EnrollmentRequest",
    "ProgressUpdateRequest",
]
