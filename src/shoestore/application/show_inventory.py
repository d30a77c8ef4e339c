"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from shoestore.domain.model.inventory import InventoryRecord
from shoestore.domain.service.inventory_ledger import InventoryLedger


@dataclass(frozen=True)
class InventoryLineDTO:
    product_model_id: int
    size: str
    total: int
    reserved: int
    available: int


def to_inventory_line(record: InventoryRecord) -> InventoryLineDTO:
    return InventoryLineDTO(
        product_model_id=record.product_model_id,
        size=record.size,
        total=record.quantity_available,
        reserved=record.quantity_reserved,
        available=record.actual_available,
    )


class ShowInventoryHandler:

    def __init__(self, ledger: InventoryLedger) -> None:
        self._ledger = ledger

    def handle(
        self,
        product_model_id: int | None = None,
        available_only: bool = False,
    ) -> list[InventoryLineDTO]:
        if available_only and product_model_id is not None:
            records = self._ledger.list_available(product_model_id)
        else:
            records = self._ledger.list_records(product_model_id)
            if available_only:
                records = [r for r in records if r.is_available]
        records = sorted(records, key=lambda r: (r.product_model_id, r.size))
        return [to_inventory_line(r) for r in records]
