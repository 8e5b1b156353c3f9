"""Use case for learner login and learner token resolution."""

import structlog

from educa.application.identity.dtos import AccessToken
from educa.application.identity.protocols.learner_repository import LearnerRepositoryProtocol
from educa.application.identity.protocols.password_service import PasswordServiceProtocol
from educa.application.identity.protocols.token_service import TokenServiceProtocol
from educa.domain.common.exceptions import AuthenticationError, ValidationError
from educa.domain.common.value_objects.ids import LearnerId
from educa.domain.identity.entities.learner import Learner, normalize_email
from educa.domain.identity.exceptions import InvalidCredentialsError

logger = structlog.get_logger(__name__)


class LearnerAuthenticationUseCase:
    """Use case for learner authentication operations."""

    def __init__(
        self,
        learner_repository: LearnerRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.learner_repository = learner_repository
        self.password_service = password_service
        self.token_service = token_service

    def authenticate_learner(self, email: str, password: str) -> tuple[Learner, AccessToken]:
        """
        Authenticate a learner with email and password.

        Args:
            email: Learner's email address
            password: Learner's plain text password

        Returns:
            Tuple of (authenticated learner, access token)

        Raises:
            InvalidCredentialsError: If credentials are invalid
        """
        learner = self.learner_repository.find_by_email(normalize_email(email))

        # Verify against a dummy hash so unknown emails take as long as wrong passwords
        if not learner:
            self.password_service.verify_password(password, self.password_service.get_dummy_hash())
            raise InvalidCredentialsError

        if not self.password_service.verify_password(password, learner.hashed_password):
            raise InvalidCredentialsError

        token = self.token_service.create_access_token(str(learner.id.value), role="learner")
        logger.info("learner_authenticated", learner_id=learner.id.value)
        return learner, token

    def get_learner_from_token(self, token: str) -> Learner:
        """
        Resolve the learner a token was issued to.

        Raises:
            AuthenticationError: If the token is invalid, not a learner token,
                or its learner no longer exists
        """
        claims = self.token_service.verify_access_token(token)
        if claims is None or claims.role != "learner":
            raise AuthenticationError

        try:
            learner_id = LearnerId(int(claims.subject))
        except (ValueError, ValidationError):
            raise AuthenticationError from None

        learner = self.learner_repository.find_by_id(learner_id)
        if not learner:
            raise AuthenticationError
        return learner
