from .administrator_repository import AdministratorRepository
from .learner_repository import LearnerRepository

__all__ = [
    "AdministratorRepository",
    "LearnerRepository",
]
