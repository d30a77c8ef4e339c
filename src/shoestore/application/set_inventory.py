"""Application service: Set Inventory use case (admin provisioning)."""

from __future__ import annotations

from shoestore.application.access import require_admin
from shoestore.application.show_inventory import InventoryLineDTO, to_inventory_line
from shoestore.domain.context import RequestContext
from shoestore.domain.exceptions import EntityNotFoundError
from shoestore.domain.repository.catalog_repository import CatalogRepository
from shoestore.domain.service.inventory_ledger import InventoryLedger


class SetInventoryHandler:

    def __init__(self, ledger: InventoryLedger, catalog_repo: CatalogRepository) -> None:
        self._ledger = ledger
        self._catalog_repo = catalog_repo

    def handle(
        self,
        ctx: RequestContext,
        product_model_id: int,
        size: str,
        quantity: int,
    ) -> InventoryLineDTO:
        """Set the on-hand quantity of one model in one size.

        Existing reservations are kept as they are.
        """
        require_admin(ctx.principal)
        if self._catalog_repo.get_by_id(product_model_id) is None:
            raise EntityNotFoundError(f"Shoe model {product_model_id} not found")

        record = self._ledger.set_stock(product_model_id, size.strip(), quantity)
        return to_inventory_line(record)
