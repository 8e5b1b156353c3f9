"""Use case for enrollment and progress rules."""

import structlog

from educa.application.catalog.protocols.course_repository import CourseRepositoryProtocol
from educa.application.identity.protocols.learner_repository import LearnerRepositoryProtocol
from educa.domain.catalog.entities.course import Course
from educa.domain.catalog.exceptions import CourseNotFoundError
from educa.domain.common.value_objects.ids import CourseId, LearnerId
from educa.domain.identity.entities.learner import Learner, validate_progress
from educa.domain.identity.exceptions import LearnerNotFoundError

logger = structlog.get_logger(__name__)


class EnrollmentUseCase:
    """
    Governs a learner's relationship to courses.

    Enrollment is additive and idempotent; there is no unenroll. Progress is
    a single percentage per learner, independent of which courses it covers.
    """

    def __init__(
        self,
        learner_repository: LearnerRepositoryProtocol,
        course_repository: CourseRepositoryProtocol,
    ) -> None:
        self.learner_repository = learner_repository
        self.course_repository = course_repository

    def _get_learner(self, learner_id: int) -> Learner:
        learner = self.learner_repository.find_by_id(LearnerId(learner_id))
        if not learner:
            raise LearnerNotFoundError(learner_id)
        return learner

    def enroll(self, learner_id: int, course_id: int) -> Learner:
        """
        Enroll a learner in a course.

        Enrolling in a course the learner already holds is a no-op.

        Raises:
            LearnerNotFoundError: If the learner does not exist
            CourseNotFoundError: If the course does not exist
        """
        learner = self._get_learner(learner_id)
        course = self.course_repository.find_by_id(CourseId(course_id))
        if not course:
            raise CourseNotFoundError(course_id)

        if learner.enroll(course.id):
            self.learner_repository.add_enrollment(learner.id, course.id)
            logger.info("learner_enrolled", learner_id=learner_id, course_id=course_id)
        else:
            logger.debug("learner_already_enrolled", learner_id=learner_id, course_id=course_id)
        return learner

    def set_progress(self, learner_id: int, value: int) -> Learner:
        """
        Overwrite a learner's progress.

        Raises:
            ValidationError: If value is outside [0, 100]
            LearnerNotFoundError: If the learner does not exist
        """
        validate_progress(value)
        learner = self._get_learner(learner_id)
        learner.set_progress(value)
        learner = self.learner_repository.save(learner)

        logger.info("learner_progress_set", learner_id=learner_id, progress=value)
        return learner

    def list_enrolled_courses(self, learner_id: int) -> list[Course]:
        """
        List the courses a learner is enrolled in, ordered by course ID.

        Raises:
            LearnerNotFoundError: If the learner does not exist
        """
        learner = self._get_learner(learner_id)
        if not learner.enrolled_course_ids:
            return []
        return self.course_repository.find_by_ids(learner.enrolled_course_ids)
