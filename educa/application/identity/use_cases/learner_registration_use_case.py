"""Use case for learner registration."""

import structlog

from educa.application.identity.protocols.learner_repository import LearnerRepositoryProtocol
from educa.application.identity.protocols.password_service import PasswordServiceProtocol
from educa.domain.common.exceptions import ValidationError
from educa.domain.identity.entities.learner import Learner, normalize_email
from educa.domain.identity.exceptions import EmailAlreadyExistsError, RegistrationDisabledError
from educa.feature_flags import is_user_registrations_enabled

logger = structlog.get_logger(__name__)


class LearnerRegistrationUseCase:
    """Use case for learner registration operations."""

    def __init__(
        self,
        learner_repository: LearnerRepositoryProtocol,
        password_service: PasswordServiceProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.learner_repository = learner_repository
        self.password_service = password_service

    def register_learner(self, full_name: str, email: str, password: str) -> Learner:
        """
        Register a new learner account.

        Args:
            full_name: Learner's display name
            email: Learner's email address (compared case-insensitively)
            password: Plain text password (will be hashed)

        Returns:
            Created learner with progress 0 and no enrollments

        Raises:
            RegistrationDisabledError: If registration is disabled via feature flag
            ValidationError: If any field is empty
            EmailAlreadyExistsError: If email is already registered
        """
        if not is_user_registrations_enabled():
            raise RegistrationDisabledError

        if not full_name or not full_name.strip():
            raise ValidationError("Full name cannot be empty", field="full_name")
        if not email or not email.strip():
            raise ValidationError("Email cannot be empty", field="email")
        if not password:
            raise ValidationError("Password cannot be empty", field="password")

        if self.learner_repository.find_by_email(normalize_email(email)) is not None:
            raise EmailAlreadyExistsError(normalize_email(email))

        hashed_password = self.password_service.hash_password(password)
        learner = Learner.create(full_name=full_name, email=email, hashed_password=hashed_password)
        learner = self.learner_repository.save(learner)

        logger.info("learner_registered", learner_id=learner.id.value, email=learner.email)
        return learner
