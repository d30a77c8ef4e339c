"""Abstract repository for the InventoryRecord aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shoestore.domain.model.inventory import InventoryRecord


class InventoryRepository(ABC):

    @abstractmethod
    def get(self, product_model_id: int, size: str) -> InventoryRecord | None:
        """Return the record for a (model, size) pair, or None."""

    @abstractmethod
    def list_by_model(self, product_model_id: int) -> list[InventoryRecord]:
        """Return every size record of one shoe model."""

    @abstractmethod
    def list_all(self) -> list[InventoryRecord]:
        """Return every inventory record."""

    @abstractmethod
    def save(self, record: InventoryRecord) -> None:
        """Persist a new or updated inventory record."""
