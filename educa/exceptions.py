"""Custom exception hierarchy for the Educa application layer."""

from starlette import status


class EducaError(Exception):
    """Base exception for infrastructure-level Educa errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class StorageError(EducaError):
    """
    The backing store failed.

    Raised by repositories for any database error. Not retried here; retry
    policy belongs to the database client.
    """

    def __init__(self, operation: str, reason: str | None = None) -> None:
        """Initialize with the failed repository operation."""
        self.operation = operation
        self.reason = reason
        message = f"Storage failure during {operation}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
