"""Application service: Confirm Order use case (admin "process order").

PENDING -> CONFIRMED; the lifecycle commits every reserved line.
"""

from __future__ import annotations

from shoestore.application.access import require_admin
from shoestore.application.change_order_status import apply_status_change
from shoestore.application.dto import OrderDTO
from shoestore.domain.context import RequestContext
from shoestore.domain.model.order import OrderStatus
from shoestore.domain.repository.order_repository import OrderRepository
from shoestore.domain.service.order_lifecycle import OrderLifecycle


class ConfirmOrderHandler:

    def __init__(self, order_repo: OrderRepository, lifecycle: OrderLifecycle) -> None:
        self._order_repo = order_repo
        self._lifecycle = lifecycle

    def handle(self, ctx: RequestContext, order_id: int) -> OrderDTO:
        require_admin(ctx.principal)
        return apply_status_change(
            ctx, self._order_repo, self._lifecycle, order_id, OrderStatus.CONFIRMED
        )
