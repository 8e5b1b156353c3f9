"""Billing invoice for a learner's enrollments."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from educa.domain.common.value_objects.ids import CourseId, LearnerId


@dataclass(frozen=True)
class InvoiceLine:
    """One billed course."""

    course_id: CourseId
    description: str
    instructor: str
    amount: Decimal


@dataclass(frozen=True)
class InvoiceDocument:
    """
    Line-itemized invoice over every course a learner is enrolled in.

    An empty enrollment set yields a valid invoice with no lines and a zero total.
    """

    invoice_number: str
    learner_id: LearnerId
    learner_name: str
    learner_email: str
    lines: tuple[InvoiceLine, ...]
    total: Decimal
    currency: str
    issued_at: datetime

    @property
    def item_count(self) -> int:
        return len(self.lines)
