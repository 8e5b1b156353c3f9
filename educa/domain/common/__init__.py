"""
Domain common module.

Contains base classes for domain modeling:
- Entity: Objects with identity and lifecycle
- The domain exception hierarchy
"""

from .entity import Entity, EntityId
from .exceptions import (
    AuthenticationError,
    BusinessRuleViolationError,
    DomainError,
    DuplicateError,
    EntityNotFoundError,
    ValidationError,
)

__all__ = [
    "AuthenticationError",
    "BusinessRuleViolationError",
    "DomainError",
    "DuplicateError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "ValidationError",
]
