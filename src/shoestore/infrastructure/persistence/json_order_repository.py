"""JSON-file-backed implementation of OrderRepository.

Orders are stored with their items inline; item ids are unique across
all orders.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from shoestore.domain.exceptions import EntityNotFoundError
from shoestore.domain.model.order import Order, OrderItem, OrderStatus
from shoestore.domain.model.value_objects import Money, Quantity
from shoestore.domain.repository.order_repository import OrderRepository
from shoestore.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._file.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def exists_by_order_number(self, order_number: str) -> bool:
        return any(raw["order_number"] == order_number for raw in self._file.load())

    def list_by_user(self, user_id: int) -> list[Order]:
        return [self._to_domain(raw) for raw in self._file.load() if raw["user_id"] == user_id]

    def list_by_status(self, status: OrderStatus) -> list[Order]:
        return [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw["status"] == status.value
        ]

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, order: Order) -> None:
        order.validate_order_number()
        with self._file.transaction() as orders:
            if order.id is None:
                order.id = JsonFile.next_id(orders)
            self._assign_item_ids(orders, order.items)

            # Upsert: replace if exists, otherwise append
            for i, raw in enumerate(orders):
                if raw["id"] == order.id:
                    orders[i] = self._to_raw(order)
                    break
            else:
                orders.append(self._to_raw(order))

    def save_items(self, order_id: int, items: list[OrderItem]) -> list[OrderItem]:
        with self._file.transaction() as orders:
            for raw in orders:
                if raw["id"] == order_id:
                    break
            else:
                raise EntityNotFoundError(f"Order #{order_id} not found")

            self._assign_item_ids(orders, items)
            known = {i["id"] for i in raw["items"]}
            raw["items"].extend(
                self._item_to_raw(item) for item in items if item.id not in known
            )
        return items

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _assign_item_ids(orders: list[dict], items: list[OrderItem]) -> None:
        next_id = max(
            (i["id"] for raw in orders for i in raw["items"]), default=0
        ) + 1
        for item in items:
            if item.id is None:
                item.id = next_id
                next_id += 1

    @staticmethod
    def _item_to_raw(item: OrderItem) -> dict:
        return {
            "id": item.id,
            "order_id": item.order_id,
            "product_model_id": item.product_model_id,
            "size": item.size,
            "quantity": item.quantity.value,
            "unit_price": str(item.unit_price.amount),
            "currency": item.unit_price.currency,
        }

    @classmethod
    def _to_raw(cls, order: Order) -> dict:
        return {
            "id": order.id,
            "order_number": order.order_number,
            "user_id": order.user_id,
            "shipping_address_id": order.shipping_address_id,
            "status": order.status.value,
            "total_amount": str(order.total_amount.amount),
            "currency": order.total_amount.currency,
            "order_date": order.order_date.isoformat(),
            "shipped_date": order.shipped_date.isoformat() if order.shipped_date else None,
            "delivered_date": order.delivered_date.isoformat() if order.delivered_date else None,
            "items": [cls._item_to_raw(item) for item in order.items],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderItem(
                id=i["id"],
                order_id=i["order_id"],
                product_model_id=i["product_model_id"],
                size=i["size"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            order_number=raw["order_number"],
            shipping_address_id=raw["shipping_address_id"],
            status=OrderStatus(raw["status"]),
            total_amount=Money(Decimal(raw["total_amount"]), raw.get("currency", "USD")),
            items=items,
            order_date=datetime.fromisoformat(raw["order_date"]),
            shipped_date=_parse_date(raw.get("shipped_date")),
            delivered_date=_parse_date(raw.get("delivered_date")),
        )


def _parse_date(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None
