"""Domain service: unique 7-digit order numbers."""

from __future__ import annotations

import random
import time
from collections.abc import Callable

import structlog

from shoestore.domain.model.order import ORDER_NUMBER_MAX, ORDER_NUMBER_MIN

logger = structlog.get_logger(__name__)

MAX_ATTEMPTS = 100

_RANGE = ORDER_NUMBER_MAX - ORDER_NUMBER_MIN + 1


class OrderNumberGenerator:
    """Draws random order numbers until the uniqueness check accepts one.

    After ``max_attempts`` collisions it gives up and derives the number
    from the current time in milliseconds.  That fallback is not checked
    for uniqueness.
    """

    def __init__(
        self,
        exists: Callable[[str], bool],
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.time,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        self._exists = exists
        self._rng = rng or random.SystemRandom()
        self._clock = clock
        self._max_attempts = max_attempts

    def generate(self) -> str:
        for attempt in range(1, self._max_attempts + 1):
            candidate = str(self._rng.randint(ORDER_NUMBER_MIN, ORDER_NUMBER_MAX))
            if not self._exists(candidate):
                logger.debug("Generated unique order number", order_number=candidate)
                return candidate
            logger.debug(
                "Order number already exists",
                order_number=candidate,
                attempt=attempt,
                max_attempts=self._max_attempts,
            )

        fallback = self.fallback_number()
        logger.warning(
            "Could not generate unique order number, using fallback",
            attempts=self._max_attempts,
            order_number=fallback,
        )
        return fallback

    def fallback_number(self) -> str:
        millis = int(self._clock() * 1000)
        return str(ORDER_NUMBER_MIN + millis % _RANGE)
