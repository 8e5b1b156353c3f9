from .document_renderer import DocumentRenderer, compute_certificate_number

__all__ = [
    "DocumentRenderer",
    "compute_certificate_number",
]
