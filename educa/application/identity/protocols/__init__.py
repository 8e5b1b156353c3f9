from .administrator_repository import AdministratorRepositoryProtocol
from .learner_repository import LearnerRepositoryProtocol
from .password_service import PasswordServiceProtocol
from .token_service import TokenServiceProtocol

__all__ = [
    "AdministratorRepositoryProtocol",
    "LearnerRepositoryProtocol",
    "PasswordServiceProtocol",
    "TokenServiceProtocol",
]
