"""JSON-file-backed implementation of CatalogRepository."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from pathlib import Path

from shoestore.domain.model.catalog import ProductModel
from shoestore.domain.model.value_objects import Money
from shoestore.domain.repository.catalog_repository import CatalogRepository
from shoestore.infrastructure.persistence.json_file import JsonFile


class JsonCatalogRepository(CatalogRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- CatalogRepository interface ------------------------------------------

    def get_by_id(self, model_id: int) -> ProductModel | None:
        return self._load().get(model_id)

    def find_all_by_ids(self, model_ids: Iterable[int]) -> list[ProductModel]:
        models = self._load()
        return [models[i] for i in dict.fromkeys(model_ids) if i in models]

    def list_all(self) -> list[ProductModel]:
        return list(self._load().values())

    def save(self, model: ProductModel) -> None:
        with self._file.transaction() as records:
            if model.id is None:
                model.id = JsonFile.next_id(records)
            for i, raw in enumerate(records):
                if raw["id"] == model.id:
                    records[i] = self._to_raw(model)
                    break
            else:
                records.append(self._to_raw(model))

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, ProductModel]:
        return {raw["id"]: self._to_domain(raw) for raw in self._file.load()}

    @staticmethod
    def _to_raw(model: ProductModel) -> dict:
        return {
            "id": model.id,
            "name": model.name,
            "price": str(model.price.amount),
            "currency": model.price.currency,
            "is_active": model.is_active,
            "product_is_active": model.product_is_active,
        }

    @staticmethod
    def _to_domain(raw: dict) -> ProductModel:
        return ProductModel(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            is_active=raw.get("is_active", True),
            product_is_active=raw.get("product_is_active", True),
        )
