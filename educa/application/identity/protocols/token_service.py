from typing import Protocol

from educa.application.identity.dtos import AccessToken, Role, TokenClaims


class TokenServiceProtocol(Protocol):
    def create_access_token(self, subject: str, role: Role) -> AccessToken: ...

    def verify_access_token(self, token: str) -> TokenClaims | None: ...
