"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the application and CLI layers can catch them uniformly and map them to
user-facing responses.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated (bad request)."""


class InsufficientStockError(ValidationError):
    """Requested quantity exceeds the stock that can still be reserved."""

    def __init__(
        self,
        product_model_id: int,
        size: str,
        requested: int,
        available: int,
    ) -> None:
        super().__init__(
            f"Insufficient inventory for shoe model {product_model_id} "
            f"size {size}. Requested: {requested}, available: {available}"
        )
        self.product_model_id = product_model_id
        self.size = size
        self.requested = requested
        self.available = available


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidTransitionError(DomainException):
    """The requested order status is not reachable from the current one."""

    def __init__(self, current: object, requested: object) -> None:
        current_name = getattr(current, "value", current)
        requested_name = getattr(requested, "value", requested)
        super().__init__(
            f"Invalid status transition from {current_name} to {requested_name}"
        )
        self.current = current
        self.requested = requested


class IllegalStateError(DomainException):
    """An aggregate was mutated directly from a state that forbids it."""


class AccessDeniedError(DomainException):
    """The caller may not act on the requested resource."""
