"""Integration tests for the PlaceOrder (checkout) use case.

Uses in-memory fake repositories - no file I/O.
"""

import random

import pytest

from shoestore.application.dto import CheckoutRequest, OrderLineSpec
from shoestore.application.place_order import PlaceOrderHandler
from shoestore.domain.context import RequestContext
from shoestore.domain.exceptions import (
    AccessDeniedError,
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from shoestore.domain.model.catalog import ProductModel
from shoestore.domain.model.inventory import InventoryRecord
from shoestore.domain.model.order import OrderStatus, is_valid_order_number
from shoestore.domain.model.user import Principal, ShippingAddress
from shoestore.domain.model.value_objects import Money
from shoestore.domain.service.inventory_ledger import InventoryLedger
from shoestore.domain.service.order_item_builder import OrderItemBuilder
from shoestore.domain.service.order_number_generator import OrderNumberGenerator
from tests.fakes import (
    FakeAddressRepository,
    FakeCatalogRepository,
    FakeInventoryRepository,
    FakeOrderRepository,
)

ALICE = 1
BOB = 2


def _setup():
    """Build the handler over fakes: two models, stock for both, one address per user."""
    order_repo = FakeOrderRepository()
    catalog_repo = FakeCatalogRepository([
        ProductModel(id=10, name="Runner Blue", price=Money.of("50.00")),
        ProductModel(id=20, name="Trail Black", price=Money.of("80.00")),
    ])
    inventory_repo = FakeInventoryRepository([
        InventoryRecord(10, "42", quantity_available=10, quantity_reserved=0),
        InventoryRecord(20, "43", quantity_available=1, quantity_reserved=0),
    ])
    address_repo = FakeAddressRepository([
        ShippingAddress(id=None, user_id=ALICE, street="1 Herzl St", city="Haifa", postal_code="3100001"),
        ShippingAddress(id=None, user_id=BOB, street="2 Dizengoff", city="Tel Aviv", postal_code="6100001"),
    ])
    handler = PlaceOrderHandler(
        order_repo=order_repo,
        address_repo=address_repo,
        item_builder=OrderItemBuilder(catalog_repo, InventoryLedger(inventory_repo), order_repo),
        number_generator=OrderNumberGenerator(
            order_repo.exists_by_order_number, rng=random.Random(42)
        ),
    )
    return handler, order_repo, inventory_repo


def _request(user_id=ALICE, address_id=1, lines=None) -> CheckoutRequest:
    if lines is None:
        lines = [OrderLineSpec(10, "42", 2), OrderLineSpec(20, "43", 1)]
    return CheckoutRequest(user_id=user_id, shipping_address_id=address_id, lines=lines)


def _as(user_id: int, admin: bool = False) -> RequestContext:
    return RequestContext(Principal(user_id=user_id, is_admin=admin))


class TestPlaceOrderHappyPath:

    def test_creates_pending_order_with_total(self):
        handler, _, _ = _setup()
        dto = handler.handle(_as(ALICE), _request())

        assert dto.status == "PENDING"
        assert dto.total_amount == "$180.00"
        assert dto.user_id == ALICE
        assert [(i.product_model_id, i.size, i.quantity) for i in dto.items] == [
            (10, "42", 2),
            (20, "43", 1),
        ]
        assert is_valid_order_number(dto.order_number)

    def test_reserves_stock(self):
        handler, _, inventory_repo = _setup()
        handler.handle(_as(ALICE), _request())

        assert inventory_repo.get(10, "42").quantity_reserved == 2
        assert inventory_repo.get(20, "43").quantity_reserved == 1
        assert inventory_repo.get(20, "43").actual_available == 0

    def test_persists_order_with_items(self):
        handler, order_repo, _ = _setup()
        dto = handler.handle(_as(ALICE), _request())

        saved = order_repo.get_by_id(dto.id)
        assert saved.status == OrderStatus.PENDING
        assert len(saved.items) == 2
        assert saved.total_amount == saved.calculate_total_amount()

    def test_order_is_remembered_in_request_context(self):
        handler, _, _ = _setup()
        ctx = _as(ALICE)
        dto = handler.handle(ctx, _request())
        assert ctx.cached("order", dto.id).order_number == dto.order_number

    def test_admin_may_order_for_another_user(self):
        handler, _, _ = _setup()
        dto = handler.handle(_as(99, admin=True), _request(user_id=BOB, address_id=2))
        assert dto.user_id == BOB

    def test_order_numbers_are_unique(self):
        handler, _, _ = _setup()
        line = [OrderLineSpec(10, "42", 1)]
        numbers = {handler.handle(_as(ALICE), _request(lines=line)).order_number for _ in range(5)}
        assert len(numbers) == 5


class TestPlaceOrderRejections:

    def test_empty_cart_rejected(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(ValidationError, match="Shopping cart is empty"):
            handler.handle(_as(ALICE), _request(lines=[]))
        assert order_repo.list_all() == []

    def test_other_users_address_rejected(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Address 2 not found for user 1"):
            handler.handle(_as(ALICE), _request(address_id=2))
        assert order_repo.list_all() == []

    def test_ordering_for_someone_else_denied(self):
        handler, _, _ = _setup()
        with pytest.raises(AccessDeniedError):
            handler.handle(_as(ALICE), _request(user_id=BOB, address_id=2))

    def test_insufficient_stock_reserves_nothing(self):
        handler, order_repo, inventory_repo = _setup()
        request = _request(lines=[OrderLineSpec(10, "42", 2), OrderLineSpec(20, "43", 2)])

        with pytest.raises(InsufficientStockError):
            handler.handle(_as(ALICE), request)

        assert inventory_repo.get(10, "42").quantity_reserved == 0
        assert inventory_repo.get(20, "43").quantity_reserved == 0

    def test_failed_checkout_leaves_empty_pending_shell(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Shoe model 77 not found"):
            handler.handle(_as(ALICE), _request(lines=[OrderLineSpec(77, "42", 1)]))

        [shell] = order_repo.list_all()
        assert shell.status == OrderStatus.PENDING
        assert shell.items == []
        assert shell.total_amount == Money.zero()
