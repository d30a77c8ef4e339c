"""InventoryRecord aggregate - stock counters for one shoe model in one size.

``quantity_available`` is the raw on-hand count.  ``quantity_reserved`` is the
part of that on-hand stock earmarked by pending orders, so reserved units are
still counted in ``quantity_available`` until the reservation is committed.
"""

from __future__ import annotations

from dataclasses import dataclass

from shoestore.domain.exceptions import InsufficientStockError, ValidationError
from shoestore.domain.model.value_objects import InventoryKey


def _require_positive(quantity: int, action: str) -> None:
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise ValidationError(f"{action} quantity must be an integer")
    if quantity <= 0:
        raise ValidationError(f"{action} quantity must be positive")


@dataclass
class InventoryRecord:
    """Aggregate root for per-size stock.

    Invariants:
    - both counters are >= 0
    - ``actual_available`` is never negative
    """

    product_model_id: int
    size: str
    quantity_available: int = 0
    quantity_reserved: int = 0

    def __post_init__(self) -> None:
        InventoryKey(self.product_model_id, self.size)
        if self.quantity_available < 0:
            raise ValidationError("Available quantity must be non-negative")
        if self.quantity_reserved < 0:
            raise ValidationError("Reserved quantity must be non-negative")

    @property
    def key(self) -> InventoryKey:
        return InventoryKey(self.product_model_id, self.size)

    @property
    def actual_available(self) -> int:
        """On-hand stock that is not earmarked by a reservation."""
        return max(0, self.quantity_available - self.quantity_reserved)

    @property
    def is_in_stock(self) -> bool:
        return self.quantity_available > 0

    @property
    def is_available(self) -> bool:
        """In stock and not fully reserved."""
        return self.is_in_stock and self.quantity_available > self.quantity_reserved

    def can_supply(self, quantity: int) -> bool:
        return self.is_available and self.actual_available >= quantity

    # --- Mutations ------------------------------------------------------------

    def reserve(self, quantity: int) -> None:
        """Earmark *quantity* units for a pending order."""
        _require_positive(quantity, "Reservation")
        if quantity > self.actual_available:
            raise InsufficientStockError(
                self.product_model_id, self.size, quantity, self.actual_available
            )
        self.quantity_reserved += quantity

    def release(self, quantity: int) -> None:
        """Drop a reservation that was never committed (floored at zero)."""
        _require_positive(quantity, "Release")
        self.quantity_reserved = max(0, self.quantity_reserved - quantity)

    def commit(self, quantity: int) -> None:
        """Turn a reservation into a sale: both counters shrink (floored at zero)."""
        _require_positive(quantity, "Commit")
        self.quantity_available = max(0, self.quantity_available - quantity)
        self.quantity_reserved = max(0, self.quantity_reserved - quantity)

    def restore(self, quantity: int) -> None:
        """Return previously sold units to the on-hand pool."""
        _require_positive(quantity, "Restore")
        self.quantity_available += quantity
