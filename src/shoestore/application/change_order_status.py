"""Application service: Change Order Status use case (admin).

Loads the order, lets the Order Lifecycle validate the transition and
apply its inventory side effects, then persists the order.
"""

from __future__ import annotations

import structlog

from shoestore.application.access import require_admin
from shoestore.application.dto import OrderDTO, to_order_dto
from shoestore.application.lookup import load_order
from shoestore.domain.context import RequestContext
from shoestore.domain.model.order import OrderStatus
from shoestore.domain.repository.order_repository import OrderRepository
from shoestore.domain.service.order_lifecycle import OrderLifecycle

logger = structlog.get_logger(__name__)


class ChangeOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository, lifecycle: OrderLifecycle) -> None:
        self._order_repo = order_repo
        self._lifecycle = lifecycle

    def handle(self, ctx: RequestContext, order_id: int, new_status: OrderStatus) -> OrderDTO:
        require_admin(ctx.principal)
        return apply_status_change(
            ctx, self._order_repo, self._lifecycle, order_id, new_status
        )


def apply_status_change(
    ctx: RequestContext,
    order_repo: OrderRepository,
    lifecycle: OrderLifecycle,
    order_id: int,
    new_status: OrderStatus,
) -> OrderDTO:
    logger.info("Updating order status", order_id=order_id, to_status=new_status.value)

    order = load_order(ctx, order_repo, order_id)
    previous = lifecycle.transition(order, new_status)
    order_repo.save(order)

    logger.info(
        "Updated order status",
        order_id=order_id,
        from_status=previous.value,
        to_status=order.status.value,
    )
    return to_order_dto(order)
