"""Identity domain exceptions."""

from educa.domain.common.exceptions import (
    AuthenticationError,
    DomainError,
    DuplicateError,
    EntityNotFoundError,
)


class LearnerNotFoundError(EntityNotFoundError):
    """Raised when a learner cannot be found."""

    def __init__(self, learner_id: object) -> None:
        super().__init__("Learner", learner_id)


class EmailAlreadyExistsError(DuplicateError):
    """Raised when attempting to register with an email that already exists."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email {email} is already registered", {"email": email})
        self.email = email


class InvalidCredentialsError(AuthenticationError):
    """Raised when authentication fails due to invalid credentials."""

    def __init__(self) -> None:
        super().__init__("Incorrect username or password")


class RegistrationDisabledError(DomainError):
    """Raised when learner registration is disabled via feature flag."""

    def __init__(self) -> None:
        super().__init__("Learner registration is currently disabled")
