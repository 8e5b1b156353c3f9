"""API routes for certificates and invoices."""

from fastapi import APIRouter, Depends

from educa.application.documents.use_cases.document_use_case import DocumentUseCase
from educa.core import container
from educa.infrastructure.common.di import inject_use_case
from educa.infrastructure.documents.schemas import CertificateResponse, InvoiceResponse
from educa.infrastructure.identity.dependencies import AdminRequired, CurrentLearner

router = APIRouter(prefix="/learners", tags=["documents"])


@router.get("/me/invoice", response_model=InvoiceResponse)
def get_my_invoice(
    current_learner: CurrentLearner,
    use_case: DocumentUseCase = Depends(inject_use_case(container.document_use_case)),
) -> InvoiceResponse:
    """Invoice for the authenticated learner's enrollments."""
    return InvoiceResponse.from_document(use_case.render_invoice(current_learner.id.value))


@router.get("/me/certificates/{course_id}", response_model=CertificateResponse)
def get_my_certificate(
    course_id: int,
    current_learner: CurrentLearner,
    use_case: DocumentUseCase = Depends(inject_use_case(container.document_use_case)),
) -> CertificateResponse:
    """Certificate for a course the authenticated learner has completed."""
    certificate = use_case.issue_certificate(current_learner.id.value, course_id)
    return CertificateResponse.from_view(certificate)


@router.get("/{learner_id}/invoice", response_model=InvoiceResponse)
def get_learner_invoice(
    learner_id: int,
    _admin: AdminRequired,
    use_case: DocumentUseCase = Depends(inject_use_case(container.document_use_case)),
) -> InvoiceResponse:
    """Invoice for any learner (administrators only)."""
    return InvoiceResponse.from_document(use_case.render_invoice(learner_id))


@router.get("/{learner_id}/certificates/{course_id}", response_model=CertificateResponse)
def get_learner_certificate(
    learner_id: int,
    course_id: int,
    _admin: AdminRequired,
    use_case: DocumentUseCase = Depends(inject_use_case(container.document_use_case)),
) -> CertificateResponse:
    """Certificate for any learner (administrators only)."""
    return CertificateResponse.from_view(use_case.issue_certificate(learner_id, course_id))
