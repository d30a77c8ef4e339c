"""Order aggregate - the core of the ordering domain.

The Order is an aggregate root that owns its line items and its status
state machine.  Inventory side effects of a status change are coordinated
by the OrderLifecycle domain service; the aggregate only guards its own
invariants.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from shoestore.domain.exceptions import IllegalStateError, ValidationError
from shoestore.domain.model.value_objects import Money, Quantity

ORDER_NUMBER_MIN = 1_000_000
ORDER_NUMBER_MAX = 9_999_999


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    def allowed_transitions(self) -> frozenset[OrderStatus]:
        return _TRANSITIONS[self]

    def can_transition_to(self, target: OrderStatus) -> bool:
        return target in _TRANSITIONS[self]

    @property
    def can_be_cancelled(self) -> bool:
        return OrderStatus.CANCELLED in _TRANSITIONS[self]

    @property
    def is_completed(self) -> bool:
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)

    @property
    def is_in_progress(self) -> bool:
        return self in (OrderStatus.PROCESSING, OrderStatus.SHIPPED)


_DESCRIPTIONS = {
    OrderStatus.PENDING: "Order is pending confirmation",
    OrderStatus.CONFIRMED: "Order has been confirmed",
    OrderStatus.PROCESSING: "Order is being processed",
    OrderStatus.SHIPPED: "Order has been shipped",
    OrderStatus.DELIVERED: "Order has been delivered",
    OrderStatus.CANCELLED: "Order has been cancelled",
}

_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def is_valid_order_number(order_number: str | None) -> bool:
    """True for a 7-digit string between 1000000 and 9999999."""
    if order_number is None or len(order_number) != 7 or not order_number.isdigit():
        return False
    return ORDER_NUMBER_MIN <= int(order_number) <= ORDER_NUMBER_MAX


@dataclass
class OrderItem:
    """One (shoe model, size, quantity) line with its price snapshot.

    ``unit_price`` is locked when the order is placed; later catalog price
    changes never reach existing orders.  Only ``correct()`` (admin
    correction path) may change a persisted line.
    """

    id: int | None
    order_id: int
    product_model_id: int
    size: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time

    def __post_init__(self) -> None:
        if self.unit_price.is_zero:
            raise ValidationError("Unit price must be positive")

    @property
    def total_price(self) -> Money:
        return self.unit_price * self.quantity.value

    def correct(
        self,
        quantity: int | None = None,
        size: str | None = None,
        unit_price: Money | None = None,
    ) -> None:
        if quantity is not None:
            self.quantity = Quantity(quantity)
        if size is not None and size.strip():
            self.size = size.strip()
        if unit_price is not None:
            if unit_price.is_zero:
                raise ValidationError("Unit price must be positive")
            self.unit_price = unit_price


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use ``Order.create_pending()`` for new orders.  The ``__init__`` is
    intentionally simple so the repository can reconstitute persisted
    orders without re-validating.
    """

    id: int | None
    user_id: int
    order_number: str
    shipping_address_id: int
    status: OrderStatus = OrderStatus.PENDING
    total_amount: Money = field(default_factory=Money.zero)
    items: list[OrderItem] = field(default_factory=list)
    order_date: datetime = field(default_factory=utcnow)
    shipped_date: datetime | None = None
    delivered_date: datetime | None = None

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create_pending(
        user_id: int,
        order_number: str,
        shipping_address_id: int,
    ) -> Order:
        """Create an empty PENDING order shell with a zero total."""
        order = Order(
            id=None,
            user_id=user_id,
            order_number=order_number,
            shipping_address_id=shipping_address_id,
        )
        order.validate_order_number()
        return order

    def validate_order_number(self) -> None:
        if not is_valid_order_number(self.order_number):
            raise ValidationError(
                f"Order number must be exactly 7 digits between "
                f"{ORDER_NUMBER_MIN} and {ORDER_NUMBER_MAX}, got {self.order_number!r}"
            )

    # --- Line items -----------------------------------------------------------

    def attach_items(self, items: list[OrderItem]) -> None:
        """Attach the freshly built line items and recompute the total."""
        if self.status != OrderStatus.PENDING:
            raise IllegalStateError("Items can only be attached to a pending order")
        if self.items:
            raise IllegalStateError(f"Order {self.order_number} already has items")
        for item in items:
            if item.order_id != self.id:
                raise ValidationError(
                    f"Order item belongs to order {item.order_id}, not {self.id}"
                )
        self.items = list(items)
        self.update_total_amount()

    def correct_item(self, item_id: int, **changes) -> OrderItem:
        """Admin correction of one line; the total follows the line."""
        item = self._find_item(item_id)
        item.correct(**changes)
        self.update_total_amount()
        return item

    # --- Totals ---------------------------------------------------------------

    def calculate_total_amount(self) -> Money:
        result = Money.zero(self.total_amount.currency)
        for item in self.items:
            result = result + item.total_price
        return result

    def update_total_amount(self) -> None:
        self.total_amount = self.calculate_total_amount()

    # --- Guarded state mutators -----------------------------------------------

    def confirm(self) -> None:
        if self.status != OrderStatus.PENDING:
            raise IllegalStateError("Only pending orders can be confirmed")
        self.status = OrderStatus.CONFIRMED

    def start_processing(self) -> None:
        if self.status != OrderStatus.CONFIRMED:
            raise IllegalStateError("Only confirmed orders can be processed")
        self.status = OrderStatus.PROCESSING

    def mark_as_shipped(self, when: datetime | None = None) -> None:
        if self.status != OrderStatus.PROCESSING:
            raise IllegalStateError("Only orders being processed can be shipped")
        self.status = OrderStatus.SHIPPED
        self.shipped_date = when or utcnow()

    def mark_as_delivered(self, when: datetime | None = None) -> None:
        if self.status != OrderStatus.SHIPPED:
            raise IllegalStateError("Only shipped orders can be delivered")
        self.status = OrderStatus.DELIVERED
        self.delivered_date = when or utcnow()

    def mark_as_cancelled(self) -> None:
        if not self.status.can_be_cancelled:
            raise IllegalStateError(
                f"Order cannot be cancelled in current status: {self.status.value}"
            )
        self.status = OrderStatus.CANCELLED

    # --- Internal helpers -----------------------------------------------------

    def _find_item(self, item_id: int) -> OrderItem:
        for item in self.items:
            if item.id == item_id:
                return item
        raise ValidationError(f"Order item {item_id} not found in order {self.order_number}")
