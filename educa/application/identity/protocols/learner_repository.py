from typing import Protocol

from educa.domain.common.value_objects.ids import CourseId, LearnerId
from educa.domain.identity.entities.learner import Learner


class LearnerRepositoryProtocol(Protocol):
    def find_by_id(self, learner_id: LearnerId) -> Learner | None: ...

    def find_by_email(self, email: str) -> Learner | None: ...

    def list_all(self, query: str | None = None) -> list[Learner]: ...

    def save(self, learner: Learner) -> Learner: ...

    def add_enrollment(self, learner_id: LearnerId, course_id: CourseId) -> bool: ...

    def delete(self, learner_id: LearnerId) -> bool: ...
