"""Application service: Cancel Order use case.

Available to the order's owner and to admins.  What happens to the stock
depends on how far the order got: a PENDING order releases its
reservations, a CONFIRMED or PROCESSING order returns its sold units to
the available pool.  Shipped, delivered and cancelled orders cannot be
cancelled.
"""

from __future__ import annotations

from shoestore.application.access import require_owner_or_admin
from shoestore.application.change_order_status import apply_status_change
from shoestore.application.dto import OrderDTO
from shoestore.application.lookup import load_order
from shoestore.domain.context import RequestContext
from shoestore.domain.model.order import OrderStatus
from shoestore.domain.repository.order_repository import OrderRepository
from shoestore.domain.service.order_lifecycle import OrderLifecycle


class CancelOrderHandler:

    def __init__(self, order_repo: OrderRepository, lifecycle: OrderLifecycle) -> None:
        self._order_repo = order_repo
        self._lifecycle = lifecycle

    def handle(self, ctx: RequestContext, order_id: int) -> OrderDTO:
        # Loaded here for the ownership check, reused from the context below.
        order = load_order(ctx, self._order_repo, order_id)
        require_owner_or_admin(ctx.principal, order.user_id)
        return apply_status_change(
            ctx, self._order_repo, self._lifecycle, order_id, OrderStatus.CANCELLED
        )
