"""Abstract repository for users' shipping addresses."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shoestore.domain.model.user import ShippingAddress


class AddressRepository(ABC):

    @abstractmethod
    def get_for_user(self, user_id: int, address_id: int) -> ShippingAddress | None:
        """Return the address if it exists AND belongs to *user_id*."""

    @abstractmethod
    def list_by_user(self, user_id: int) -> list[ShippingAddress]:
        """Return every address of one user."""

    @abstractmethod
    def save(self, address: ShippingAddress) -> None:
        """Persist a new or updated address, assigning an id to new ones."""
