"""Translation of database failures into StorageError."""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from educa.exceptions import StorageError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def translate_storage_errors(func: F) -> F:
    """
    Decorator for repository methods.

    Rolls back the repository's session and raises StorageError when
    SQLAlchemy fails. Domain exceptions raised inside the method pass through.

    Usage:
        class CourseRepository:
            @translate_storage_errors
            def list_all(self) -> list[Course]:
                ...
    """

    @wraps(func)
    def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:  # noqa: ANN401
        try:
            return func(self, *args, **kwargs)
        except SQLAlchemyError as e:
            self.db.rollback()
            operation = f"{type(self).__name__}.{func.__name__}"
            logger.error(f"Storage failure in {operation}: {e!s}", exc_info=True)
            raise StorageError(operation, type(e).__name__) from e

    return wrapper  # type: ignore[return-value]
