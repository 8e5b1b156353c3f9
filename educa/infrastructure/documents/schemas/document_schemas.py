"""Pydantic schemas for certificates and invoices.

Documents are returned as structured fields; formatting them as HTML or PDF
is left to the client.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from educa.domain.documents.entities.certificate import CertificateView
from educa.domain.documents.entities.invoice import InvoiceDocument


class CertificateResponse(BaseModel):
    """Schema for a rendered certificate."""

    certificate_number: str
    headline: str
    learner_name: str
    course_title: str
    statement: str

    @classmethod
    def from_view(cls, view: CertificateView) -> "CertificateResponse":
        return cls(
            certificate_number=view.certificate_number,
            headline=view.headline,
            learner_name=view.learner_name,
            course_title=view.course_title,
            statement=view.statement,
        )


class InvoiceLineResponse(BaseModel):
    """Schema for one invoice line."""

    course_id: int
    description: str
    instructor: str
    amount: Decimal


class InvoiceResponse(BaseModel):
    """Schema for a rendered invoice."""

    invoice_number: str
    learner_id: int
    learner_name: str
    learner_email: str
    lines: list[InvoiceLineResponse] = Field(..., description="One line per enrolled course")
    total: Decimal
    currency: str
    issued_at: datetime

    @classmethod
    def from_document(cls, invoice: InvoiceDocument) -> "InvoiceResponse":
        return cls(
            invoice_number=invoice.invoice_number,
            learner_id=invoice.learner_id.value,
            learner_name=invoice.learner_name,
            learner_email=invoice.learner_email,
            lines=[
                InvoiceLineResponse(
                    course_id=line.course_id.value,
                    description=line.description,
                    instructor=line.instructor,
                    amount=line.amount,
                )
                for line in invoice.lines
            ],
            total=invoice.total,
            currency=invoice.currency,
            issued_at=invoice.issued_at,
        )
