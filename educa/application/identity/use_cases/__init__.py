from .access_guard_use_case import AccessGuardUseCase
from .learner_authentication_use_case import LearnerAuthenticationUseCase
from .learner_directory_use_case import LearnerDirectoryUseCase
from .learner_registration_use_case import LearnerRegistrationUseCase

__all__ = [
    "AccessGuardUseCase",
    "LearnerAuthenticationUseCase",
    "LearnerDirectoryUseCase",
    "LearnerRegistrationUseCase",
]
