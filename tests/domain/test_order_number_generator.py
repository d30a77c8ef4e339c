"""Unit tests for the OrderNumberGenerator domain service."""

import random

from structlog.testing import capture_logs

from shoestore.domain.model.order import is_valid_order_number
from shoestore.domain.service.order_number_generator import (
    MAX_ATTEMPTS,
    OrderNumberGenerator,
)


class CountingOracle:
    """Answers 'taken' for the first *taken_calls* lookups."""

    def __init__(self, taken_calls: int) -> None:
        self.taken_calls = taken_calls
        self.seen: list[str] = []

    def __call__(self, order_number: str) -> bool:
        self.seen.append(order_number)
        return len(self.seen) <= self.taken_calls


class TestGenerate:

    def test_numbers_are_seven_digits_in_range(self):
        generator = OrderNumberGenerator(lambda n: False, rng=random.Random(7))
        for _ in range(200):
            assert is_valid_order_number(generator.generate())

    def test_returns_first_free_candidate(self):
        oracle = CountingOracle(taken_calls=3)
        generator = OrderNumberGenerator(oracle, rng=random.Random(1))

        number = generator.generate()

        assert len(oracle.seen) == 4
        assert number == oracle.seen[-1]

    def test_last_attempt_still_counts(self):
        oracle = CountingOracle(taken_calls=MAX_ATTEMPTS - 1)
        generator = OrderNumberGenerator(oracle, rng=random.Random(3), clock=lambda: 0.0)

        number = generator.generate()

        assert len(oracle.seen) == MAX_ATTEMPTS
        assert number == oracle.seen[-1]


class TestFallback:

    def test_fallback_after_exhausting_attempts(self):
        oracle = CountingOracle(taken_calls=10**6)
        generator = OrderNumberGenerator(
            oracle, rng=random.Random(5), clock=lambda: 1_700_000_000.5
        )

        with capture_logs() as logs:
            number = generator.generate()

        assert len(oracle.seen) == MAX_ATTEMPTS
        assert number == str(1_000_000 + 1_700_000_000_500 % 9_000_000)
        assert is_valid_order_number(number)
        assert logs[-1]["log_level"] == "warning"

    def test_fallback_is_always_seven_digits(self):
        for seconds in (0.0, 8_999.999, 9_000.0, 1_234_567.891):
            generator = OrderNumberGenerator(lambda n: True, clock=lambda s=seconds: s)
            assert is_valid_order_number(generator.fallback_number())
