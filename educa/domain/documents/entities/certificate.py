"""Certificate view derived from a learner name and a course title."""

from dataclasses import dataclass

CERTIFICATE_HEADLINE = "Certificate of Completion"


@dataclass(frozen=True)
class CertificateView:
    """
    Structured certificate content, ready for a presentation layer to format.

    The certificate number is derived from the learner name and course title,
    so the same pair always yields the same certificate.
    """

    certificate_number: str
    learner_name: str
    course_title: str
    headline: str = CERTIFICATE_HEADLINE

    @property
    def statement(self) -> str:
        return (
            f"This certifies that {self.learner_name} has successfully completed "
            f"the course {self.course_title}."
        )
