"""Domain service: Order Item Builder.

Turns the requested cart lines of a checkout into persisted order items,
with an all-or-nothing reservation outcome:

  Phase 1 - load and validate: batch-load every referenced shoe model, then
            check each line in request order.  The first failing line
            decides the error; nothing has been mutated yet.
  Phase 2 - reserve: reserve each line in request order.  If a reservation
            is refused (another checkout took the stock in the meantime) or
            anything later fails, every line reserved so far is released
            before the error propagates.
  Phase 3 - materialize: one OrderItem per line with the model's current
            price as the unit price snapshot, saved as one batch.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from shoestore.domain.context import RequestContext
from shoestore.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from shoestore.domain.model.catalog import ProductModel
from shoestore.domain.model.order import OrderItem
from shoestore.domain.model.value_objects import Money, Quantity
from shoestore.domain.repository.catalog_repository import CatalogRepository
from shoestore.domain.repository.order_repository import OrderRepository
from shoestore.domain.service.inventory_ledger import InventoryLedger

logger = structlog.get_logger(__name__)

PRODUCT_MODEL = "product_model"


@dataclass(frozen=True)
class LineRequest:
    """One requested cart line, not validated yet."""

    product_model_id: int
    size: str
    quantity: int


class OrderItemBuilder:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        ledger: InventoryLedger,
        order_repo: OrderRepository,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._ledger = ledger
        self._order_repo = order_repo

    def build_items(
        self,
        order_id: int,
        lines: list[LineRequest],
        ctx: RequestContext | None = None,
    ) -> list[OrderItem]:
        logger.info("Creating order items", order_id=order_id, line_count=len(lines))

        models = self._load_models(lines, ctx)
        self._validate(lines, models)

        reserved: list[LineRequest] = []
        try:
            self._reserve_all(lines, reserved)
            return self._create_and_save(order_id, lines, models)
        except Exception:
            self._release_reserved(reserved)
            raise

    @staticmethod
    def calculate_total_amount(items: list[OrderItem]) -> Money:
        total = Money.zero()
        for item in items:
            total = total + item.total_price
        return total

    # --- Phase 1 --------------------------------------------------------------

    def _load_models(
        self,
        lines: list[LineRequest],
        ctx: RequestContext | None,
    ) -> dict[int, ProductModel]:
        ids = list(dict.fromkeys(line.product_model_id for line in lines))
        if ctx is not None:
            return ctx.get_many(PRODUCT_MODEL, ids, self._catalog_repo.find_all_by_ids)
        return {model.id: model for model in self._catalog_repo.find_all_by_ids(ids)}

    def _validate(self, lines: list[LineRequest], models: dict[int, ProductModel]) -> None:
        for line in lines:
            model = models.get(line.product_model_id)
            if model is None:
                raise EntityNotFoundError(f"Shoe model {line.product_model_id} not found")
            if not model.is_orderable:
                raise ValidationError(f"Shoe model {model.id} is not available")
            if line.quantity <= 0:
                raise ValidationError("Quantity must be positive")
            if not self._ledger.is_available(line.product_model_id, line.size, line.quantity):
                raise InsufficientStockError(
                    line.product_model_id,
                    line.size,
                    line.quantity,
                    self._ledger.available_quantity(line.product_model_id, line.size),
                )

    # --- Phase 2 --------------------------------------------------------------

    def _reserve_all(self, lines: list[LineRequest], reserved: list[LineRequest]) -> None:
        for line in lines:
            if not self._ledger.reserve(line.product_model_id, line.size, line.quantity):
                raise InsufficientStockError(
                    line.product_model_id,
                    line.size,
                    line.quantity,
                    self._ledger.available_quantity(line.product_model_id, line.size),
                )
            reserved.append(line)

    def _release_reserved(self, reserved: list[LineRequest]) -> None:
        # Best effort: a failed release leaves the record over-reserved.
        for line in reserved:
            try:
                self._ledger.release(line.product_model_id, line.size, line.quantity)
            except Exception as exc:
                logger.error(
                    "Failed to release reserved inventory",
                    product_model_id=line.product_model_id,
                    size=line.size,
                    quantity=line.quantity,
                    error=str(exc),
                )

    # --- Phase 3 --------------------------------------------------------------

    def _create_and_save(
        self,
        order_id: int,
        lines: list[LineRequest],
        models: dict[int, ProductModel],
    ) -> list[OrderItem]:
        items = [
            OrderItem(
                id=None,
                order_id=order_id,
                product_model_id=line.product_model_id,
                size=line.size,
                quantity=Quantity(line.quantity),
                unit_price=models[line.product_model_id].price,  # <-- price snapshot
            )
            for line in lines
        ]
        saved = self._order_repo.save_items(order_id, items)
        logger.info("Created order items", order_id=order_id, item_count=len(saved))
        return saved
