"""Abstract repository for the Order aggregate (items included)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shoestore.domain.model.order import Order, OrderItem, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order with its items, or None if not found."""

    @abstractmethod
    def exists_by_order_number(self, order_number: str) -> bool:
        """True if an order already uses this order number."""

    @abstractmethod
    def list_by_user(self, user_id: int) -> list[Order]:
        """Return every order placed by one user."""

    @abstractmethod
    def list_by_status(self, status: OrderStatus) -> list[Order]:
        """Return every order currently in *status*."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order, assigning an id to new ones."""

    @abstractmethod
    def save_items(self, order_id: int, items: list[OrderItem]) -> list[OrderItem]:
        """Persist a batch of new line items under an existing order.

        Assigns item ids and returns the saved items.
        """
