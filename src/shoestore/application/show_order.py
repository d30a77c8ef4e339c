"""Application service: Show / List Orders use cases (queries)."""

from __future__ import annotations

from shoestore.application.access import require_admin, require_owner_or_admin
from shoestore.application.dto import OrderDTO, to_order_dto
from shoestore.application.lookup import load_order
from shoestore.domain.context import RequestContext
from shoestore.domain.model.order import OrderStatus
from shoestore.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, ctx: RequestContext, order_id: int) -> OrderDTO:
        order = load_order(ctx, self._order_repo, order_id)
        require_owner_or_admin(ctx.principal, order.user_id)
        return to_order_dto(order)


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        ctx: RequestContext,
        user_id: int | None = None,
        status: OrderStatus | None = None,
    ) -> list[OrderDTO]:
        """Own orders by default; other users' orders and status filters need admin."""
        if status is not None or (user_id is not None and user_id != ctx.principal.user_id):
            require_admin(ctx.principal)

        if status is not None:
            orders = self._order_repo.list_by_status(status)
            if user_id is not None:
                orders = [o for o in orders if o.user_id == user_id]
        else:
            orders = self._order_repo.list_by_user(
                user_id if user_id is not None else ctx.principal.user_id
            )
        return [to_order_dto(o) for o in sorted(orders, key=lambda o: o.id or 0)]
