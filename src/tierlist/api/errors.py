"""Map domain exceptions onto HTTP error responses."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..exceptions import (
    AppError,
    IntegrityConstraintViolation,
    InvalidRankingError,
    MalformedAddressError,
    NotFoundError,
    UnauthorizedError,
)

_STATUS_BY_ERROR: dict[type[AppError], int] = {
    UnauthorizedError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidRankingError: status.HTTP_400_BAD_REQUEST,
    MalformedAddressError: status.HTTP_400_BAD_REQUEST,
    IntegrityConstraintViolation: status.HTTP_409_CONFLICT,
}


def status_for(exc: AppError) -> int:
    for cls in type(exc).__mro__:
        if cls in _STATUS_BY_ERROR:
            return _STATUS_BY_ERROR[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    """Convert :class:`AppError` exceptions into JSON payloads."""

    return JSONResponse(
        status_code=status_for(exc),
        content={
            "detail": {
                "status": "error",
                "failure_reason": exc.failure_reason,
                "message": str(exc),
            }
        },
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)  # type: ignore[arg-type]


__all__ = ["app_error_handler", "install_error_handlers", "status_for"]
