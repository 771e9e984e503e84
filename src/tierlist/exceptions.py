"""Domain level exceptions and helpers for repository layers."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, TypeVar

from sqlalchemy import exc as sa_exc

__all__ = [
    "AppError",
    "UnauthorizedError",
    "NotFoundError",
    "InvalidRankingError",
    "MalformedAddressError",
    "RepositoryError",
    "IntegrityConstraintViolation",
    "DatabaseOperationError",
    "ensure_found",
    "handle_sqlalchemy_errors",
]

T = TypeVar("T")


class AppError(Exception):
    """Base class for application specific errors."""

    failure_reason = "error"


class UnauthorizedError(AppError):
    """Raised when the actor is neither the creator nor the admin."""

    failure_reason = "unauthorized"


class NotFoundError(AppError):
    """Raised when a template, ranking or ranking entry could not be located."""

    failure_reason = "not_found"


class InvalidRankingError(AppError):
    """Raised when a ranking does not carry exactly its template's items."""

    failure_reason = "invalid_ranking"


class MalformedAddressError(AppError):
    """Raised when an address string fails format validation."""

    failure_reason = "malformed_address"


class RepositoryError(AppError):
    """Base class for persistence layer failures."""

    failure_reason = "repository_error"


class IntegrityConstraintViolation(RepositoryError):
    """Raised when a database constraint is violated."""

    failure_reason = "integrity_violation"


class DatabaseOperationError(RepositoryError):
    """Raised for unexpected database errors."""

    failure_reason = "database_error"


@dataclass(slots=True)
class _EntityContext:
    """Internal helper describing the entity for error messages."""

    entity: str | None = None

    def format(self, message: str) -> str:
        if self.entity:
            return f"{self.entity}: {message}"
        return message


def ensure_found(record: T | None, *, entity: str, identifier: object) -> T:
    """Ensure a record exists, otherwise raise :class:`NotFoundError`."""

    if record is None:
        raise NotFoundError(f"{entity} '{identifier}' not found")
    return record


def _translate_sqlalchemy_error(exc: Exception, *, context: _EntityContext) -> RepositoryError:
    if isinstance(exc, sa_exc.IntegrityError):
        return IntegrityConstraintViolation(context.format("integrity constraint violated"))
    if isinstance(exc, sa_exc.DBAPIError):
        return DatabaseOperationError(context.format("database operation failed"))
    return RepositoryError(context.format(str(exc)))


@contextmanager
def handle_sqlalchemy_errors(*, entity: str | None = None) -> Iterator[None]:
    """Translate SQLAlchemy errors into domain specific ones."""

    context = _EntityContext(entity)
    try:
        yield
    except (sa_exc.IntegrityError, sa_exc.DBAPIError) as exc:
        raise _translate_sqlalchemy_error(exc, context=context) from exc
