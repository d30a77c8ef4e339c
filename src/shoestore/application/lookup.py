"""Entity lookups shared by the order handlers."""

from __future__ import annotations

from shoestore.domain.context import RequestContext
from shoestore.domain.exceptions import EntityNotFoundError
from shoestore.domain.model.order import Order
from shoestore.domain.repository.order_repository import OrderRepository

ORDER = "order"


def load_order(ctx: RequestContext, order_repo: OrderRepository, order_id: int) -> Order:
    """Load an order once per request; raises EntityNotFoundError."""
    order = ctx.get_or_load(ORDER, order_id, order_repo.get_by_id)
    if order is None:
        raise EntityNotFoundError(f"Order #{order_id} not found")
    return order
