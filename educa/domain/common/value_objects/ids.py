from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class LearnerId(EntityId):
    """Strongly-typed learner identifier."""


@dataclass(frozen=True)
class CourseId(EntityId):
    """Strongly-typed course identifier."""


@dataclass(frozen=True)
class AdministratorId(EntityId):
    """Strongly-typed administrator identifier."""
