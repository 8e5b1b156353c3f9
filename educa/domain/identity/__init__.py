"""Identity domain layer."""

from educa.domain.identity.entities.administrator import Administrator
from educa.domain.identity.entities.learner import Learner
from educa.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    LearnerNotFoundError,
    RegistrationDisabledError,
)

__all__ = [
    "Administrator",
    "EmailAlreadyExistsError",
    "InvalidCredentialsError",
    "Learner",
    "LearnerNotFoundError",
    "RegistrationDisabledError",
]
