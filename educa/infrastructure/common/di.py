"""Bridges between FastAPI request scope and the DI container."""

from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider
from sqlalchemy.orm import Session

from educa.core import container
from educa.database import DatabaseSession

T = TypeVar("T")


def provide_with_session(provider: Provider[T], db: Session) -> T:
    """Build `provider` with `db` bound as the container's session."""
    with container.db.override(db):
        return provider()


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    The request-scoped session is bound only while the use case is built;
    the override is gone before the route body runs.
    """

    def dependency(db: DatabaseSession) -> T:
        return provide_with_session(provider, db)

    return dependency
