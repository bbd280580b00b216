from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError, SQLAlchemyError

from .base import AppError

__all__ = [
    "DatabaseError",
    "ConstraintViolationError",
    "ConnectionFailureError",
    "classify_database_error",
]


class DatabaseError(AppError):
    """A statement failed. Every database failure is reported as a 500."""

    detail = "Database error"


class ConstraintViolationError(DatabaseError):
    pass


class ConnectionFailureError(DatabaseError):
    pass


def _error_text(exc: SQLAlchemyError) -> str:
    # Prefer the driver's own message over SQLAlchemy's wrapped one,
    # which also carries the statement and parameters.
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        text = str(exc.orig).strip()
        if text:
            return text
    return str(exc)


def classify_database_error(exc: SQLAlchemyError) -> DatabaseError:
    text = _error_text(exc)
    if isinstance(exc, IntegrityError):
        return ConstraintViolationError(text)
    if isinstance(exc, OperationalError):
        return ConnectionFailureError(text)
    return DatabaseError(text)
