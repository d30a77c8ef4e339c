"""Maps domain exceptions to the client-facing error shape.

Every error kind gets its own status code and error name so a caller can
tell a missing order from an invalid transition without parsing messages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from shoestore.domain.exceptions import (
    AccessDeniedError,
    DomainException,
    EntityNotFoundError,
    IllegalStateError,
    InsufficientStockError,
    InvalidTransitionError,
    ValidationError,
)


@dataclass(frozen=True)
class ErrorResponse:

    status: int
    error: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"[{self.status} {self.error}] {self.message}"


def to_error_response(exc: DomainException) -> ErrorResponse:
    message = str(exc)

    # Subclasses first: insufficient stock is a bad request with quantities attached.
    if isinstance(exc, InsufficientStockError):
        return ErrorResponse(
            400,
            "BAD_REQUEST",
            message,
            {
                "product_model_id": exc.product_model_id,
                "size": exc.size,
                "requested": exc.requested,
                "available": exc.available,
            },
        )
    if isinstance(exc, ValidationError):
        return ErrorResponse(400, "BAD_REQUEST", message)
    if isinstance(exc, EntityNotFoundError):
        return ErrorResponse(404, "NOT_FOUND", message)
    if isinstance(exc, InvalidTransitionError):
        return ErrorResponse(
            422,
            "INVALID_TRANSITION",
            message,
            {
                "from": getattr(exc.current, "value", exc.current),
                "to": getattr(exc.requested, "value", exc.requested),
            },
        )
    if isinstance(exc, IllegalStateError):
        return ErrorResponse(409, "ILLEGAL_STATE", message)
    if isinstance(exc, AccessDeniedError):
        return ErrorResponse(403, "ACCESS_DENIED", message)
    return ErrorResponse(500, "INTERNAL_ERROR", message)
