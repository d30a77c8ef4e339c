"""Data Transfer Objects - plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from shoestore.domain.model.order import Order

_DATE_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class OrderLineSpec:
    """Input: one cart line (shoe model + size + quantity)."""

    product_model_id: int
    size: str
    quantity: int


@dataclass(frozen=True)
class CheckoutRequest:
    """Input: everything the checkout entry point needs."""

    user_id: int
    shipping_address_id: int
    lines: list[OrderLineSpec] = field(default_factory=list)


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single line item as displayed to the user."""

    id: int
    product_model_id: int
    size: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    total_price: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    order_number: str
    status: str
    user_id: int
    shipping_address_id: int
    items: list[OrderItemDTO]
    total_amount: str
    order_date: str
    shipped_date: str | None = None
    delivered_date: str | None = None


def _fmt(value: datetime | None) -> str | None:
    return value.strftime(_DATE_FORMAT) if value is not None else None


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        order_number=order.order_number,
        status=order.status.value,
        user_id=order.user_id,
        shipping_address_id=order.shipping_address_id,
        items=[
            OrderItemDTO(
                id=item.id,  # type: ignore[arg-type]
                product_model_id=item.product_model_id,
                size=item.size,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                total_price=str(item.total_price),
            )
            for item in order.items
        ],
        total_amount=str(order.total_amount),
        order_date=order.order_date.strftime(_DATE_FORMAT),
        shipped_date=_fmt(order.shipped_date),
        delivered_date=_fmt(order.delivered_date),
    )
