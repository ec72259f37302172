"""Translation of storage failures into domain errors."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from sqlalchemy.exc import SQLAlchemyError

from feedback.domain.error import PersistenceError


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures inside the block as PersistenceError.

    Args:
        operation: Short name of the repository operation, for the error

    Raises:
        PersistenceError: If the wrapped statements fail
    """
    try:
        yield
    except SQLAlchemyError as e:
        detail = str(getattr(e, "orig", None) or e)
        logfire.error(
            "Storage operation failed",
            operation=operation,
            error=detail,
            error_type=type(e).__name__,
        )
        raise PersistenceError(operation, detail) from e
