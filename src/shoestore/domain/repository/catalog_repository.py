"""Abstract repository for catalog product models.

The ordering core only needs batch lookup by id; the remaining methods
exist for provisioning.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from shoestore.domain.model.catalog import ProductModel


class CatalogRepository(ABC):

    @abstractmethod
    def get_by_id(self, model_id: int) -> ProductModel | None:
        """Return a product model by its ID, or None if not found."""

    @abstractmethod
    def find_all_by_ids(self, model_ids: Iterable[int]) -> list[ProductModel]:
        """Return the models that exist among *model_ids* (missing ids are skipped)."""

    @abstractmethod
    def list_all(self) -> list[ProductModel]:
        """Return every product model in the catalog."""

    @abstractmethod
    def save(self, model: ProductModel) -> None:
        """Persist a new or updated model, assigning an id to new ones."""
