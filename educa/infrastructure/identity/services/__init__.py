from .password_service import PasswordService
from .token_service import JWTTokenService

__all__ = [
    "JWTTokenService",
    "PasswordService",
]
