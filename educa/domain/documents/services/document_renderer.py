"""
Domain service that renders certificates and invoices.

Pure domain logic: no database access, no clock. Callers pass in the
entities and the issue timestamp.
"""

import hashlib
from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal

from educa.domain.catalog.entities.course import Course
from educa.domain.common.exceptions import ValidationError
from educa.domain.documents.entities.certificate import CertificateView
from educa.domain.documents.entities.invoice import InvoiceDocument, InvoiceLine
from educa.domain.identity.entities.learner import Learner

_CERTIFICATE_DIGEST_LENGTH = 16
_CERTIFICATE_GROUP_SIZE = 4


def compute_certificate_number(learner_name: str, course_title: str) -> str:
    """
    Derive a stable certificate number from a learner name and course title.

    Inputs are whitespace-trimmed and case-folded so cosmetic differences
    do not produce a different certificate.

    Returns:
        Number such as "EDU-1A2B-3C4D-5E6F-7A8B"
    """
    hash_input = f"{learner_name.strip().casefold()}|{course_title.strip().casefold()}"
    digest = hashlib.sha256(hash_input.encode("utf-8")).hexdigest()[:_CERTIFICATE_DIGEST_LENGTH]
    groups = [
        digest[i : i + _CERTIFICATE_GROUP_SIZE]
        for i in range(0, _CERTIFICATE_DIGEST_LENGTH, _CERTIFICATE_GROUP_SIZE)
    ]
    return "EDU-" + "-".join(groups).upper()


class DocumentRenderer:
    """Derives certificate and invoice artifacts from ledger and catalog state."""

    def render_certificate(self, learner_name: str, course_title: str) -> CertificateView:
        """
        Render a certificate for a learner name and course title.

        Deterministic: identical inputs always yield an equal CertificateView.

        Raises:
            ValidationError: If either input is blank
        """
        if not learner_name or not learner_name.strip():
            raise ValidationError("Learner name cannot be empty", field="learner_name")
        if not course_title or not course_title.strip():
            raise ValidationError("Course title cannot be empty", field="course_title")

        return CertificateView(
            certificate_number=compute_certificate_number(learner_name, course_title),
            learner_name=learner_name.strip(),
            course_title=course_title.strip(),
        )

    def render_invoice(
        self,
        learner: Learner,
        courses: Iterable[Course],
        currency: str,
        issued_at: datetime,
    ) -> InvoiceDocument:
        """
        Render an invoice with one line per enrolled course.

        Courses the learner is not enrolled in are ignored, and each course is
        billed once even if it appears more than once in `courses`.
        """
        billed: dict[int, Course] = {}
        for course in courses:
            if learner.is_enrolled_in(course.id):
                billed.setdefault(course.id.value, course)

        lines = tuple(
            InvoiceLine(
                course_id=course.id,
                description=course.title,
                instructor=course.instructor,
                amount=course.price,
            )
            for _, course in sorted(billed.items())
        )
        total = sum((line.amount for line in lines), Decimal("0"))

        return InvoiceDocument(
            invoice_number=f"INV-{learner.id.value:06d}",
            learner_id=learner.id,
            learner_name=learner.full_name,
            learner_email=learner.email,
            lines=lines,
            total=total,
            currency=currency,
            issued_at=issued_at,
        )
