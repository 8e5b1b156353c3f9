"""DTOs exchanged between identity use cases and the token service."""

from typing import Literal

from pydantic import BaseModel

Role = Literal["admin", "learner"]


class AccessToken(BaseModel):
    """Signed bearer token handed to the caller."""

    access_token: str
    token_type: str
    expires_in: int


class TokenClaims(BaseModel):
    """Verified contents of an access token."""

    subject: str
    role: Role


class AdminPrincipal(BaseModel):
    """An authenticated administrator, as asserted by a verified token."""

    username: str
