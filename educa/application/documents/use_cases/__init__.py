from .document_use_case import DocumentUseCase

__all__ = ["DocumentUseCase"]
