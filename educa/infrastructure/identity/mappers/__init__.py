from .administrator_mapper import AdministratorMapper
from .learner_mapper import LearnerMapper

__all__ = [
    "AdministratorMapper",
    "LearnerMapper",
]
