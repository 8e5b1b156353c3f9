from .enrollment_use_case import EnrollmentUseCase

__all__ = ["EnrollmentUseCase"]
