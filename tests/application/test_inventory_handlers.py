"""Integration tests for the inventory use cases (set / show)."""

import pytest

from shoestore.application.set_inventory import SetInventoryHandler
from shoestore.application.show_inventory import ShowInventoryHandler
from shoestore.domain.context import RequestContext
from shoestore.domain.exceptions import AccessDeniedError, EntityNotFoundError, ValidationError
from shoestore.domain.model.catalog import ProductModel
from shoestore.domain.model.inventory import InventoryRecord
from shoestore.domain.model.user import Principal
from shoestore.domain.model.value_objects import Money
from shoestore.domain.service.inventory_ledger import InventoryLedger
from tests.fakes import FakeCatalogRepository, FakeInventoryRepository

ADMIN = Principal(user_id=100, is_admin=True)


def _setup():
    inventory_repo = FakeInventoryRepository([
        InventoryRecord(2, "40", 4, 4),
        InventoryRecord(1, "43", 5, 1),
        InventoryRecord(1, "42", 0, 0),
    ])
    catalog_repo = FakeCatalogRepository([
        ProductModel(id=1, name="Runner", price=Money.of("50.00")),
        ProductModel(id=2, name="Trail", price=Money.of("70.00")),
    ])
    ledger = InventoryLedger(inventory_repo)
    return ledger, catalog_repo, inventory_repo


class TestSetInventory:

    def test_creates_new_record(self):
        ledger, catalog_repo, inventory_repo = _setup()
        line = SetInventoryHandler(ledger, catalog_repo).handle(
            RequestContext(ADMIN), 2, " 41 ", 6
        )
        assert (line.size, line.total, line.reserved, line.available) == ("41", 6, 0, 6)
        assert inventory_repo.get(2, "41").quantity_available == 6

    def test_overwrite_keeps_reserved(self):
        ledger, catalog_repo, _ = _setup()
        line = SetInventoryHandler(ledger, catalog_repo).handle(RequestContext(ADMIN), 1, "43", 9)
        assert (line.total, line.reserved, line.available) == (9, 1, 8)

    def test_unknown_model(self):
        ledger, catalog_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Shoe model 3 not found"):
            SetInventoryHandler(ledger, catalog_repo).handle(RequestContext(ADMIN), 3, "42", 1)

    def test_negative_quantity(self):
        ledger, catalog_repo, _ = _setup()
        with pytest.raises(ValidationError):
            SetInventoryHandler(ledger, catalog_repo).handle(RequestContext(ADMIN), 1, "42", -5)

    def test_requires_admin(self):
        ledger, catalog_repo, _ = _setup()
        with pytest.raises(AccessDeniedError):
            SetInventoryHandler(ledger, catalog_repo).handle(
                RequestContext(Principal(user_id=1)), 1, "42", 5
            )


class TestShowInventory:

    def test_lists_everything_sorted(self):
        ledger, _, _ = _setup()
        lines = ShowInventoryHandler(ledger).handle()
        assert [(line.product_model_id, line.size) for line in lines] == [(1, "42"), (1, "43"), (2, "40")]

    def test_filter_by_model(self):
        ledger, _, _ = _setup()
        lines = ShowInventoryHandler(ledger).handle(product_model_id=1)
        assert [line.size for line in lines] == ["42", "43"]

    def test_available_only(self):
        ledger, _, _ = _setup()
        assert [(line.product_model_id, line.size) for line in ShowInventoryHandler(ledger).handle(available_only=True)] == [(1, "43")]
        assert ShowInventoryHandler(ledger).handle(product_model_id=2, available_only=True) == []
