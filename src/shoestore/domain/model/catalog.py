"""Catalog entities consumed by the ordering core.

Product models live in the catalog and have their own lifecycle: prices
change and models are switched on and off.  Orders only keep a price
snapshot and the model id.
"""

from __future__ import annotations

from dataclasses import dataclass

from shoestore.domain.exceptions import ValidationError
from shoestore.domain.model.value_objects import Money


@dataclass
class ProductModel:
    """A sellable shoe model (one colourway of a shoe)."""

    id: int | None
    name: str
    price: Money
    is_active: bool = True
    product_is_active: bool = True

    @property
    def is_orderable(self) -> bool:
        """Both the model and its parent product must be switched on."""
        return self.is_active and self.product_is_active

    def update_price(self, new_price: Money) -> None:
        """Change the model price.

        This does NOT affect any existing orders because order items
        capture a price snapshot at creation time.
        """
        if new_price.amount <= 0:
            raise ValidationError("Product model price must be greater than zero")
        self.price = new_price
