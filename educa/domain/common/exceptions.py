"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.
They are translated to HTTP responses by the handlers registered
in `educa.main`.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: Empty course title, progress outside 0-100, negative price.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: Enrolling a learner in a course id that doesn't exist.
    """

    def __init__(
        self, entity_type: str, entity_id: object, message: str | None = None
    ) -> None:
        message = message or f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id


class DuplicateError(DomainError):
    """
    Raised when a unique constraint would be violated.

    Example: Registering a second learner with an existing email.
    """


class BusinessRuleViolationError(DomainError):
    """
    Raised when a business rule is violated.

    Example: Requesting a certificate for a course the learner never finished.
    """

    def __init__(self, rule: str, message: str | None = None) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, {"rule": rule})
        self.rule = rule


class AuthenticationError(DomainError):
    """
    Raised when a bearer token is missing, malformed or fails verification.
    """

    def __init__(self, message: str = "Could not validate credentials") -> None:
        super().__init__(message)
