"""Document domain exceptions."""

from educa.domain.common.exceptions import BusinessRuleViolationError


class CertificateNotAvailableError(BusinessRuleViolationError):
    """Raised when a certificate is requested for a course the learner has not earned."""

    def __init__(self, learner_id: int, course_id: int, reason: str) -> None:
        super().__init__(
            "certificate_requires_enrollment",
            f"Learner {learner_id} cannot receive a certificate for course {course_id}: {reason}",
        )
        self.learner_id = learner_id
        self.course_id = course_id
        self.reason = reason
