"""Token creation and verification service."""

from datetime import UTC, datetime, timedelta

import jwt
from jwt import InvalidTokenError
from pydantic import ValidationError as PydanticValidationError

from educa.application.identity.dtos import AccessToken, Role, TokenClaims

ALGORITHM = "HS256"
ACCESS_TOKEN_TYPE = "access"


class JWTTokenService:
    """Signs and verifies HS256 access tokens carrying a subject and a role."""

    def __init__(self, secret_key: str, expire_minutes: int) -> None:
        if not secret_key:
            raise ValueError("SECRET_KEY must be configured to sign tokens")
        self.secret_key = secret_key
        self.expire_minutes = expire_minutes

    def create_access_token(self, subject: str, role: Role) -> AccessToken:
        """Create an access token for a subject acting in the given role."""
        expire = datetime.now(UTC) + timedelta(minutes=self.expire_minutes)
        to_encode = {"sub": subject, "role": role, "exp": expire, "type": ACCESS_TOKEN_TYPE}
        return AccessToken(
            access_token=jwt.encode(to_encode, self.secret_key, algorithm=ALGORITHM),
            token_type="bearer",  # noqa: S106
            expires_in=self.expire_minutes * 60,  # Convert to seconds
        )

    def verify_access_token(self, token: str) -> TokenClaims | None:
        """Verify an access token and return its claims if valid."""
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[ALGORITHM],
                options={"require": ["exp", "sub"]},
            )
        except InvalidTokenError:
            return None

        if payload.get("type") != ACCESS_TOKEN_TYPE:
            return None
        try:
            return TokenClaims(subject=payload["sub"], role=payload.get("role"))
        except PydanticValidationError:
            return None
