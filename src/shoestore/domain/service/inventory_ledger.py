"""Domain service: Inventory Ledger.

Per (shoe model, size) stock bookkeeping for the order lifecycle.  Four
operations exist because a reservation that can still be dropped and a sale
that can still be returned are different phases:

- ``reserve``  earmark stock for a pending order
- ``release``  drop a reservation that was never committed
- ``commit``   turn a reservation into a sale (confirmed order)
- ``restore``  return sold stock after a post-confirmation cancellation

A missing record is not an error here: ``reserve`` answers False and the
other mutations are logged no-ops.  Callers decide whether that is fatal.

Each call is a single read-then-write against the repository.  ``reserve``
re-checks availability on the record it just loaded but does not lock it,
so concurrent checkouts rely on the store's own concurrency control.
"""

from __future__ import annotations

import structlog

from shoestore.domain.exceptions import EntityNotFoundError, ValidationError
from shoestore.domain.model.inventory import InventoryRecord
from shoestore.domain.repository.inventory_repository import InventoryRepository

logger = structlog.get_logger(__name__)


def _check_quantity(quantity: int) -> None:
    if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
        raise ValidationError("Quantity must be positive")


class InventoryLedger:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    # --- Queries --------------------------------------------------------------

    def is_available(self, product_model_id: int, size: str, quantity: int) -> bool:
        """True if the record exists, is available and can supply *quantity*."""
        _check_quantity(quantity)
        record = self._inventory_repo.get(product_model_id, size)
        if record is None:
            return False
        return record.can_supply(quantity)

    def available_quantity(self, product_model_id: int, size: str) -> int:
        record = self._inventory_repo.get(product_model_id, size)
        return record.actual_available if record is not None else 0

    def get_record(self, product_model_id: int, size: str) -> InventoryRecord:
        record = self._inventory_repo.get(product_model_id, size)
        if record is None:
            raise EntityNotFoundError(
                f"No inventory record for shoe model {product_model_id} size {size}"
            )
        return record

    def list_records(self, product_model_id: int | None = None) -> list[InventoryRecord]:
        if product_model_id is None:
            return self._inventory_repo.list_all()
        return self._inventory_repo.list_by_model(product_model_id)

    def list_available(self, product_model_id: int) -> list[InventoryRecord]:
        return [
            record
            for record in self._inventory_repo.list_by_model(product_model_id)
            if record.is_available
        ]

    # --- Mutations ------------------------------------------------------------

    def reserve(self, product_model_id: int, size: str, quantity: int) -> bool:
        _check_quantity(quantity)
        log = logger.bind(product_model_id=product_model_id, size=size, quantity=quantity)

        record = self._inventory_repo.get(product_model_id, size)
        if record is None:
            log.warning("No inventory found to reserve")
            return False

        available = record.actual_available
        if available < quantity:
            log.warning("Insufficient inventory to reserve", available=available)
            return False

        record.reserve(quantity)
        self._inventory_repo.save(record)
        log.info("Reserved inventory", reserved=record.quantity_reserved)
        return True

    def release(self, product_model_id: int, size: str, quantity: int) -> None:
        _check_quantity(quantity)
        log = logger.bind(product_model_id=product_model_id, size=size, quantity=quantity)

        record = self._inventory_repo.get(product_model_id, size)
        if record is None:
            log.warning("No inventory found to release")
            return

        record.release(quantity)
        self._inventory_repo.save(record)
        log.info("Released reserved inventory", reserved=record.quantity_reserved)

    def commit(self, product_model_id: int, size: str, quantity: int) -> None:
        _check_quantity(quantity)
        log = logger.bind(product_model_id=product_model_id, size=size, quantity=quantity)

        record = self._inventory_repo.get(product_model_id, size)
        if record is None:
            log.warning("No inventory found to commit")
            return

        record.commit(quantity)
        self._inventory_repo.save(record)
        log.info(
            "Committed reserved inventory",
            available=record.quantity_available,
            reserved=record.quantity_reserved,
        )

    def restore(self, product_model_id: int, size: str, quantity: int) -> None:
        _check_quantity(quantity)
        log = logger.bind(product_model_id=product_model_id, size=size, quantity=quantity)

        record = self._inventory_repo.get(product_model_id, size)
        if record is None:
            log.warning("No inventory found to restore")
            return

        record.restore(quantity)
        self._inventory_repo.save(record)
        log.info("Restored inventory", available=record.quantity_available)

    # --- Provisioning ---------------------------------------------------------

    def set_stock(self, product_model_id: int, size: str, quantity_available: int) -> InventoryRecord:
        """Create or overwrite the on-hand count of a record, keeping its reservations."""
        if (
            not isinstance(quantity_available, int)
            or isinstance(quantity_available, bool)
            or quantity_available < 0
        ):
            raise ValidationError("Available quantity must be a non-negative integer")
        record = self._inventory_repo.get(product_model_id, size)
        if record is None:
            record = InventoryRecord(
                product_model_id=product_model_id,
                size=size,
                quantity_available=quantity_available,
            )
        else:
            record.quantity_available = quantity_available
        self._inventory_repo.save(record)
        logger.info(
            "Inventory level set",
            product_model_id=product_model_id,
            size=size,
            available=record.quantity_available,
            reserved=record.quantity_reserved,
        )
        return record
