"""Unit tests for the InventoryRecord aggregate."""

import pytest

from shoestore.domain.exceptions import InsufficientStockError, ValidationError
from shoestore.domain.model.inventory import InventoryRecord


def _record(available: int = 10, reserved: int = 0) -> InventoryRecord:
    return InventoryRecord(
        product_model_id=1, size="42",
        quantity_available=available, quantity_reserved=reserved,
    )


class TestInventoryRecordAvailability:

    def test_actual_available_is_available_minus_reserved(self):
        assert _record(100, 25).actual_available == 75

    def test_actual_available_never_negative(self):
        # reserved above on-hand can happen after a floored commit race
        assert _record(3, 5).actual_available == 0

    def test_fully_reserved_is_not_available(self):
        record = _record(5, 5)
        assert record.is_in_stock
        assert not record.is_available

    def test_empty_is_not_in_stock(self):
        record = _record(0, 0)
        assert not record.is_in_stock
        assert not record.is_available

    def test_can_supply(self):
        record = _record(10, 4)
        assert record.can_supply(6)
        assert not record.can_supply(7)

    def test_negative_counters_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            _record(-1, 0)
        with pytest.raises(ValidationError, match="non-negative"):
            _record(1, -1)


class TestInventoryRecordReserve:

    def test_reserve_increments_reserved_only(self):
        record = _record(10)
        record.reserve(4)
        assert record.quantity_reserved == 4
        assert record.quantity_available == 10
        assert record.actual_available == 6

    def test_reserve_more_than_actual_available_rejected(self):
        record = _record(10, 8)
        with pytest.raises(InsufficientStockError) as info:
            record.reserve(3)
        assert info.value.requested == 3
        assert info.value.available == 2
        assert record.quantity_reserved == 8

    def test_reserve_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _record().reserve(0)


class TestInventoryRecordRelease:

    def test_release_decrements_reserved(self):
        record = _record(10, 6)
        record.release(4)
        assert record.quantity_reserved == 2

    def test_release_floors_at_zero(self):
        record = _record(10, 2)
        record.release(5)
        assert record.quantity_reserved == 0
        assert record.quantity_available == 10

    def test_reserve_then_release_is_identity(self):
        record = _record(10, 3)
        record.reserve(5)
        record.release(5)
        assert record.quantity_reserved == 3


class TestInventoryRecordCommit:

    def test_commit_reduces_both_counters(self):
        record = _record(10, 3)
        record.commit(3)
        assert record.quantity_available == 7
        assert record.quantity_reserved == 0

    def test_commit_floors_each_counter(self):
        record = _record(2, 1)
        record.commit(3)
        assert record.quantity_available == 0
        assert record.quantity_reserved == 0

    def test_commit_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _record().commit(-1)


class TestInventoryRecordRestore:

    def test_restore_after_commit_round_trips_available(self):
        record = _record(10, 3)
        record.commit(3)
        record.restore(3)
        assert record.quantity_available == 10
        assert record.quantity_reserved == 0

    def test_restore_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _record().restore(0)
