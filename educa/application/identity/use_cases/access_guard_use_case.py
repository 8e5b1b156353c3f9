"""Use case guarding administrator-only operations."""

import structlog

from educa.application.identity.dtos import AccessToken, AdminPrincipal
from educa.application.identity.protocols.administrator_repository import (
    AdministratorRepositoryProtocol,
)
from educa.application.identity.protocols.password_service import PasswordServiceProtocol
from educa.application.identity.protocols.token_service import TokenServiceProtocol
from educa.domain.common.exceptions import AuthenticationError, ValidationError
from educa.domain.identity.entities.administrator import Administrator
from educa.domain.identity.exceptions import InvalidCredentialsError

logger = structlog.get_logger(__name__)


class AccessGuardUseCase:
    """
    Issues and verifies administrator tokens.

    A caller is Anonymous until it holds a token minted by
    `issue_admin_token`. Every administrator operation calls `verify`
    first; a tampered or expired token is rejected and the caller is
    Anonymous again. Tokens are stateless, so there is no server-side
    logout.
    """

    def __init__(
        self,
        administrator_repository: AdministratorRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
    ) -> None:
        self.administrator_repository = administrator_repository
        self.password_service = password_service
        self.token_service = token_service

    def issue_admin_token(self, username: str, password: str) -> AccessToken:
        """
        Check administrator credentials and mint a signed token.

        Raises:
            InvalidCredentialsError: If the username is unknown or the password is wrong
        """
        administrator = self.administrator_repository.find_by_username(username.strip())

        if not administrator:
            self.password_service.verify_password(password, self.password_service.get_dummy_hash())
            raise InvalidCredentialsError

        if not self.password_service.verify_password(password, administrator.hashed_password):
            logger.warning("admin_login_failed", username=administrator.username)
            raise InvalidCredentialsError

        token = self.token_service.create_access_token(administrator.username, role="admin")
        logger.info("admin_authenticated", username=administrator.username)
        return token

    def verify(self, token: str | None) -> AdminPrincipal:
        """
        Verify an administrator token.

        Raises:
            AuthenticationError: If the token is missing, malformed, expired,
                signed with another key, or not an administrator token
        """
        if not token:
            raise AuthenticationError("Not authenticated")

        claims = self.token_service.verify_access_token(token)
        if claims is None or claims.role != "admin":
            raise AuthenticationError
        return AdminPrincipal(username=claims.subject)

    def ensure_administrator(self, username: str, password: str) -> Administrator:
        """
        Provision the configured administrator if it does not exist yet.

        An existing administrator keeps its current password.

        Raises:
            ValidationError: If the configured password is empty
        """
        if not password:
            raise ValidationError("Administrator password cannot be empty", field="password")

        existing = self.administrator_repository.find_by_username(username.strip())
        if existing:
            return existing

        administrator = Administrator.create(
            username=username, hashed_password=self.password_service.hash_password(password)
        )
        administrator = self.administrator_repository.save(administrator)
        logger.info("administrator_provisioned", username=administrator.username)
        return administrator
