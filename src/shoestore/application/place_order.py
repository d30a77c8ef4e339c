"""Application service: Place Order (checkout) use case.

Orchestrates the address book, the order number generator, the Order
aggregate and the Order Item Builder:

1. Check the caller may order for this user and that the address is theirs.
2. Create and persist an empty PENDING order shell.
3. Build the line items (validates and reserves stock, all-or-nothing).
4. Attach the items, recompute the total and persist again.

If step 3 fails the shell stays PENDING with no items; the error is
propagated unchanged and the checkout has to be retried as a whole.
"""

from __future__ import annotations

import structlog

from shoestore.application.access import require_owner_or_admin
from shoestore.application.dto import CheckoutRequest, OrderDTO, to_order_dto
from shoestore.application.lookup import ORDER
from shoestore.domain.context import RequestContext
from shoestore.domain.exceptions import EntityNotFoundError, ValidationError
from shoestore.domain.model.order import Order
from shoestore.domain.repository.address_repository import AddressRepository
from shoestore.domain.repository.order_repository import OrderRepository
from shoestore.domain.service.order_item_builder import LineRequest, OrderItemBuilder
from shoestore.domain.service.order_number_generator import OrderNumberGenerator

logger = structlog.get_logger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        address_repo: AddressRepository,
        item_builder: OrderItemBuilder,
        number_generator: OrderNumberGenerator,
    ) -> None:
        self._order_repo = order_repo
        self._address_repo = address_repo
        self._item_builder = item_builder
        self._number_generator = number_generator

    def handle(self, ctx: RequestContext, request: CheckoutRequest) -> OrderDTO:
        require_owner_or_admin(ctx.principal, request.user_id)

        if not request.lines:
            raise ValidationError("Shopping cart is empty")

        address = self._address_repo.get_for_user(
            request.user_id, request.shipping_address_id
        )
        if address is None:
            raise EntityNotFoundError(
                f"Address {request.shipping_address_id} not found for user {request.user_id}"
            )

        log = logger.bind(user_id=request.user_id, line_count=len(request.lines))
        log.info("Creating order")

        order = Order.create_pending(
            user_id=request.user_id,
            order_number=self._number_generator.generate(),
            shipping_address_id=address.id,  # type: ignore[arg-type]
        )
        self._order_repo.save(order)

        lines = [
            LineRequest(spec.product_model_id, spec.size, spec.quantity)
            for spec in request.lines
        ]
        try:
            items = self._item_builder.build_items(order.id, lines, ctx)  # type: ignore[arg-type]
        except Exception:
            log.warning(
                "Checkout failed, order shell left without items",
                order_id=order.id,
                order_number=order.order_number,
            )
            raise

        order.attach_items(items)
        self._order_repo.save(order)
        ctx.remember(ORDER, order.id, order)

        log.info(
            "Created order",
            order_id=order.id,
            order_number=order.order_number,
            total_amount=str(order.total_amount),
        )
        return to_order_dto(order)
