"""Domain service: Order Lifecycle.

Drives an order through its status state machine and keeps the inventory
ledger consistent with the order status:

    PENDING -> CONFIRMED -> PROCESSING -> SHIPPED -> DELIVERED
       |           |             |
       +-----------+-------------+--> CANCELLED

- entering CONFIRMED commits every line (reservation becomes a sale)
- cancelling a PENDING order releases every line's reservation
- cancelling a CONFIRMED or PROCESSING order restores every line's stock
- SHIPPED and DELIVERED record their dates; PROCESSING has no stock effect

Transitions outside the table raise InvalidTransitionError before anything
is touched.
"""

from __future__ import annotations

from datetime import datetime

import structlog

from shoestore.domain.exceptions import InvalidTransitionError
from shoestore.domain.model.order import Order, OrderStatus, utcnow
from shoestore.domain.service.inventory_ledger import InventoryLedger

logger = structlog.get_logger(__name__)


class OrderLifecycle:

    def __init__(self, ledger: InventoryLedger, clock=utcnow) -> None:
        self._ledger = ledger
        self._clock = clock

    @staticmethod
    def validate_transition(current: OrderStatus, target: OrderStatus) -> None:
        if not current.can_transition_to(target):
            raise InvalidTransitionError(current, target)

    def transition(self, order: Order, target: OrderStatus) -> OrderStatus:
        """Apply *target* to *order* with its inventory side effects.

        Returns the previous status.  The caller persists the order.
        """
        current = order.status
        self.validate_transition(current, target)

        if target is OrderStatus.CONFIRMED:
            self._confirm(order)
        elif target is OrderStatus.PROCESSING:
            order.start_processing()
        elif target is OrderStatus.SHIPPED:
            order.mark_as_shipped(self._now())
        elif target is OrderStatus.DELIVERED:
            order.mark_as_delivered(self._now())
        elif target is OrderStatus.CANCELLED:
            self._cancel(order, current)

        logger.info(
            "Order status changed",
            order_number=order.order_number,
            from_status=current.value,
            to_status=target.value,
        )
        return current

    # --- Side effects ---------------------------------------------------------

    def _confirm(self, order: Order) -> None:
        for item in order.items:
            self._ledger.commit(item.product_model_id, item.size, item.quantity.value)
        order.confirm()
        logger.info("Committed inventory for confirmed order", order_number=order.order_number)

    def _cancel(self, order: Order, current: OrderStatus) -> None:
        if current is OrderStatus.PENDING:
            for item in order.items:
                self._ledger.release(item.product_model_id, item.size, item.quantity.value)
            logger.info(
                "Released reserved inventory for cancelled pending order",
                order_number=order.order_number,
            )
        else:
            for item in order.items:
                self._ledger.restore(item.product_model_id, item.size, item.quantity.value)
            logger.info("Restored inventory for cancelled order", order_number=order.order_number)
        order.mark_as_cancelled()

    def _now(self) -> datetime:
        return self._clock()
