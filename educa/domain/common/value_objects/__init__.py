from .ids import AdministratorId, CourseId, LearnerId

__all__ = [
    "AdministratorId",
    "CourseId",
    "LearnerId",
]
