from .administrator import Administrator
from .learner import Learner

__all__ = [
    "Administrator",
    "Learner",
]
