"""Use case for looking up, listing and removing learners."""

import structlog

from educa.application.identity.protocols.learner_repository import LearnerRepositoryProtocol
from educa.domain.common.value_objects.ids import LearnerId
from educa.domain.identity.entities.learner import Learner, normalize_email
from educa.domain.identity.exceptions import LearnerNotFoundError

logger = structlog.get_logger(__name__)


class LearnerDirectoryUseCase:
    """Read and delete operations over learner accounts."""

    def __init__(self, learner_repository: LearnerRepositoryProtocol) -> None:
        self.learner_repository = learner_repository

    def get_learner(self, learner_id: int) -> Learner:
        """
        Get a learner by ID.

        Raises:
            LearnerNotFoundError: If no learner has this ID
        """
        learner = self.learner_repository.find_by_id(LearnerId(learner_id))
        if not learner:
            raise LearnerNotFoundError(learner_id)
        return learner

    def find_by_email(self, email: str) -> Learner:
        """
        Get a learner by email, ignoring case.

        Raises:
            LearnerNotFoundError: If no learner has this email
        """
        learner = self.learner_repository.find_by_email(normalize_email(email))
        if not learner:
            raise LearnerNotFoundError(email)
        return learner

    def list_learners(self, query: str | None = None) -> list[Learner]:
        """
        List learners, optionally filtered by a case-insensitive substring
        of their name or email.
        """
        if query is not None and not query.strip():
            query = None
        return self.learner_repository.list_all(query)

    def delete_learner(self, learner_id: int) -> None:
        """
        Delete a learner and its enrollments.

        Unknown IDs are ignored so repeated deletes succeed.
        """
        deleted = self.learner_repository.delete(LearnerId(learner_id))
        logger.info("learner_deleted", learner_id=learner_id, existed=deleted)
