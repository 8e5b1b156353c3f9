from .document_schemas import CertificateResponse, InvoiceLineResponse, InvoiceResponse

__all__ = [
    "CertificateResponse",
    "InvoiceLineResponse",
    "InvoiceResponse",
]
