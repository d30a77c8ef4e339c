"""Composition root - wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from shoestore.domain.service.inventory_ledger import InventoryLedger
from shoestore.domain.service.order_item_builder import OrderItemBuilder
from shoestore.domain.service.order_lifecycle import OrderLifecycle
from shoestore.domain.service.order_number_generator import OrderNumberGenerator
from shoestore.infrastructure import settings
from shoestore.infrastructure.persistence.json_address_repository import (
    JsonAddressRepository,
)
from shoestore.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)
from shoestore.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)
from shoestore.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)

# settings.DATA_DIR is read on every call so tests can point it elsewhere.


def catalog_repository() -> JsonCatalogRepository:
    return JsonCatalogRepository(settings.DATA_DIR / "product_models.json")


def inventory_repository() -> JsonInventoryRepository:
    return JsonInventoryRepository(settings.DATA_DIR / "inventory.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings.DATA_DIR / "orders.json")


def address_repository() -> JsonAddressRepository:
    return JsonAddressRepository(settings.DATA_DIR / "addresses.json")


def inventory_ledger() -> InventoryLedger:
    return InventoryLedger(inventory_repository())


def order_lifecycle() -> OrderLifecycle:
    return OrderLifecycle(inventory_ledger())


def order_item_builder(order_repo: JsonOrderRepository) -> OrderItemBuilder:
    return OrderItemBuilder(catalog_repository(), inventory_ledger(), order_repo)


def order_number_generator(order_repo: JsonOrderRepository) -> OrderNumberGenerator:
    return OrderNumberGenerator(exists=order_repo.exists_by_order_number)
