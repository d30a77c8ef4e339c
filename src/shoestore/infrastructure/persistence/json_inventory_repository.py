"""JSON-file-backed implementation of InventoryRepository."""

from __future__ import annotations

from pathlib import Path

from shoestore.domain.model.inventory import InventoryRecord
from shoestore.domain.repository.inventory_repository import InventoryRepository
from shoestore.infrastructure.persistence.json_file import JsonFile


class JsonInventoryRepository(InventoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- InventoryRepository interface ----------------------------------------

    def get(self, product_model_id: int, size: str) -> InventoryRecord | None:
        for raw in self._file.load():
            if raw["product_model_id"] == product_model_id and raw["size"] == size:
                return self._to_domain(raw)
        return None

    def list_by_model(self, product_model_id: int) -> list[InventoryRecord]:
        return [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw["product_model_id"] == product_model_id
        ]

    def list_all(self) -> list[InventoryRecord]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, record: InventoryRecord) -> None:
        with self._file.transaction() as records:
            for i, raw in enumerate(records):
                if (
                    raw["product_model_id"] == record.product_model_id
                    and raw["size"] == record.size
                ):
                    records[i] = self._to_raw(record)
                    break
            else:
                records.append(self._to_raw(record))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(record: InventoryRecord) -> dict:
        return {
            "product_model_id": record.product_model_id,
            "size": record.size,
            "quantity_available": record.quantity_available,
            "quantity_reserved": record.quantity_reserved,
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryRecord:
        return InventoryRecord(
            product_model_id=raw["product_model_id"],
            size=raw["size"],
            quantity_available=raw["quantity_available"],
            quantity_reserved=raw.get("quantity_reserved", 0),
        )
