"""Integration tests for the status-changing use cases:
ChangeOrderStatus (admin), ConfirmOrder (admin) and CancelOrder.
"""

import pytest

from shoestore.application.cancel_order import CancelOrderHandler
from shoestore.application.change_order_status import ChangeOrderStatusHandler
from shoestore.application.confirm_order import ConfirmOrderHandler
from shoestore.domain.context import RequestContext
from shoestore.domain.exceptions import (
    AccessDeniedError,
    EntityNotFoundError,
    InvalidTransitionError,
)
from shoestore.domain.model.inventory import InventoryRecord
from shoestore.domain.model.order import Order, OrderItem, OrderStatus
from shoestore.domain.model.user import Principal
from shoestore.domain.model.value_objects import Money, Quantity
from shoestore.domain.service.inventory_ledger import InventoryLedger
from shoestore.domain.service.order_lifecycle import OrderLifecycle
from tests.fakes import FakeInventoryRepository, FakeOrderRepository

OWNER = 1
ADMIN_ID = 100


def _setup(status: OrderStatus = OrderStatus.PENDING):
    """One order of 2 x model 10 size 42; 10 on hand, those 2 reserved."""
    order_repo = FakeOrderRepository()
    inventory_repo = FakeInventoryRepository([InventoryRecord(10, "42", 10, 2)])
    item = OrderItem(
        id=1,
        order_id=1,
        product_model_id=10,
        size="42",
        quantity=Quantity(2),
        unit_price=Money.of("50.00"),
    )
    order = Order(
        id=1,
        user_id=OWNER,
        order_number="3456789",
        shipping_address_id=1,
        status=status,
        total_amount=item.total_price,
        items=[item],
    )
    order_repo.save(order)
    lifecycle = OrderLifecycle(InventoryLedger(inventory_repo))
    return order.id, order_repo, inventory_repo, lifecycle


def _counters(inventory_repo):
    record = inventory_repo.get(10, "42")
    return record.quantity_available, record.quantity_reserved


def _user(user_id: int = OWNER) -> RequestContext:
    return RequestContext(Principal(user_id=user_id))


def _admin() -> RequestContext:
    return RequestContext(Principal(user_id=ADMIN_ID, is_admin=True))


class TestChangeOrderStatus:

    def test_walks_the_happy_path(self):
        order_id, order_repo, inventory_repo, lifecycle = _setup()
        handler = ChangeOrderStatusHandler(order_repo, lifecycle)

        for status in (
            OrderStatus.CONFIRMED,
            OrderStatus.PROCESSING,
            OrderStatus.SHIPPED,
            OrderStatus.DELIVERED,
        ):
            dto = handler.handle(_admin(), order_id, status)
            assert dto.status == status.value

        saved = order_repo.get_by_id(order_id)
        assert saved.shipped_date is not None
        assert saved.delivered_date is not None
        assert _counters(inventory_repo) == (8, 0)

    def test_invalid_transition_changes_nothing(self):
        order_id, order_repo, inventory_repo, lifecycle = _setup(OrderStatus.DELIVERED)
        handler = ChangeOrderStatusHandler(order_repo, lifecycle)

        with pytest.raises(InvalidTransitionError, match="from DELIVERED to CANCELLED"):
            handler.handle(_admin(), order_id, OrderStatus.CANCELLED)

        assert order_repo.get_by_id(order_id).status == OrderStatus.DELIVERED
        assert _counters(inventory_repo) == (10, 2)

    def test_requires_admin(self):
        order_id, order_repo, _, lifecycle = _setup()
        with pytest.raises(AccessDeniedError, match="Administrator access required"):
            ChangeOrderStatusHandler(order_repo, lifecycle).handle(
                _user(), order_id, OrderStatus.CONFIRMED
            )

    def test_unknown_order(self):
        _, order_repo, _, lifecycle = _setup()
        with pytest.raises(EntityNotFoundError, match="Order #999 not found"):
            ChangeOrderStatusHandler(order_repo, lifecycle).handle(
                _admin(), 999, OrderStatus.CONFIRMED
            )


class TestConfirmOrder:

    def test_confirm_commits_stock(self):
        order_id, order_repo, inventory_repo, lifecycle = _setup()
        dto = ConfirmOrderHandler(order_repo, lifecycle).handle(_admin(), order_id)

        assert dto.status == "CONFIRMED"
        assert _counters(inventory_repo) == (8, 0)

    def test_owner_cannot_confirm(self):
        order_id, order_repo, _, lifecycle = _setup()
        with pytest.raises(AccessDeniedError):
            ConfirmOrderHandler(order_repo, lifecycle).handle(_user(), order_id)


class TestCancelOrder:

    def test_owner_cancels_pending_order_and_releases(self):
        order_id, order_repo, inventory_repo, lifecycle = _setup()
        dto = CancelOrderHandler(order_repo, lifecycle).handle(_user(), order_id)

        assert dto.status == "CANCELLED"
        assert _counters(inventory_repo) == (10, 0)

    def test_cancel_after_confirm_restores_stock(self):
        order_id, order_repo, inventory_repo, lifecycle = _setup()
        ConfirmOrderHandler(order_repo, lifecycle).handle(_admin(), order_id)
        assert _counters(inventory_repo) == (8, 0)

        CancelOrderHandler(order_repo, lifecycle).handle(_user(), order_id)
        assert _counters(inventory_repo) == (10, 0)

    def test_stranger_cannot_cancel(self):
        order_id, order_repo, inventory_repo, lifecycle = _setup()
        with pytest.raises(AccessDeniedError, match="Access denied"):
            CancelOrderHandler(order_repo, lifecycle).handle(_user(2), order_id)
        assert _counters(inventory_repo) == (10, 2)

    def test_shipped_order_cannot_be_cancelled(self):
        order_id, order_repo, _, lifecycle = _setup(OrderStatus.SHIPPED)
        with pytest.raises(InvalidTransitionError):
            CancelOrderHandler(order_repo, lifecycle).handle(_admin(), order_id)
