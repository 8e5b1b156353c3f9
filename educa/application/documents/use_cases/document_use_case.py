"""Use case for certificate and invoice generation."""

from datetime import UTC, datetime

import structlog

from educa.application.catalog.protocols.course_repository import CourseRepositoryProtocol
from educa.application.identity.protocols.learner_repository import LearnerRepositoryProtocol
from educa.domain.catalog.exceptions import CourseNotFoundError
from educa.domain.common.value_objects.ids import CourseId, LearnerId
from educa.domain.documents.entities.certificate import CertificateView
from educa.domain.documents.entities.invoice import InvoiceDocument
from educa.domain.documents.exceptions import CertificateNotAvailableError
from educa.domain.documents.services.document_renderer import DocumentRenderer
from educa.domain.identity.exceptions import LearnerNotFoundError
from educa.feature_flags import is_certificate_completion_required

logger = structlog.get_logger(__name__)


class DocumentUseCase:
    """Use case deriving certificates and invoices from ledger and catalog state."""

    def __init__(
        self,
        learner_repository: LearnerRepositoryProtocol,
        course_repository: CourseRepositoryProtocol,
        document_renderer: DocumentRenderer,
        currency: str,
    ) -> None:
        """Initialize use case with dependencies."""
        self.learner_repository = learner_repository
        self.course_repository = course_repository
        self.document_renderer = document_renderer
        self.currency = currency

    def issue_certificate(self, learner_id: int, course_id: int) -> CertificateView:
        """
        Issue a certificate for a course the learner has earned.

        Args:
            learner_id: ID of the learner
            course_id: ID of the completed course

        Returns:
            Certificate view for the learner's name and the course title

        Raises:
            LearnerNotFoundError: If the learner does not exist
            CourseNotFoundError: If the course does not exist
            CertificateNotAvailableError: If the learner is not enrolled, or
                completion is required and progress is below 100
        """
        learner = self.learner_repository.find_by_id(LearnerId(learner_id))
        if not learner:
            raise LearnerNotFoundError(learner_id)
        course = self.course_repository.find_by_id(CourseId(course_id))
        if not course:
            raise CourseNotFoundError(course_id)

        if not learner.is_enrolled_in(course.id):
            raise CertificateNotAvailableError(learner_id, course_id, "not enrolled")
        if is_certificate_completion_required() and not learner.has_completed:
            raise CertificateNotAvailableError(
                learner_id, course_id, f"progress is {learner.progress}%"
            )

        certificate = self.document_renderer.render_certificate(learner.full_name, course.title)
        logger.info(
            "certificate_issued",
            learner_id=learner_id,
            course_id=course_id,
            certificate_number=certificate.certificate_number,
        )
        return certificate

    def render_invoice(self, learner_id: int) -> InvoiceDocument:
        """
        Render an invoice over every course the learner is enrolled in.

        Raises:
            LearnerNotFoundError: If the learner does not exist
        """
        learner = self.learner_repository.find_by_id(LearnerId(learner_id))
        if not learner:
            raise LearnerNotFoundError(learner_id)

        courses = (
            self.course_repository.find_by_ids(learner.enrolled_course_ids)
            if learner.enrolled_course_ids
            else []
        )
        invoice = self.document_renderer.render_invoice(
            learner, courses, currency=self.currency, issued_at=datetime.now(UTC)
        )

        logger.info(
            "invoice_rendered",
            learner_id=learner_id,
            item_count=invoice.item_count,
            total=str(invoice.total),
        )
        return invoice
