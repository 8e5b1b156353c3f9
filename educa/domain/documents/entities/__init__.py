from .certificate import CertificateView
from .invoice import InvoiceDocument, InvoiceLine

__all__ = [
    "CertificateView",
    "InvoiceDocument",
    "InvoiceLine",
]
