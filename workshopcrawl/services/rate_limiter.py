import logging
import random
import time
from typing import Callable

logger = logging.getLogger(__name__)


class RateLimiter:
    """Politeness delay applied before every outbound request.

    Each wait lasts `base_seconds` plus a uniform random extra in
    `[0, jitter_seconds]`. Requests are issued one at a time, so no locking.
    """

    def __init__(
        self,
        base_seconds: float = 0.0,
        jitter_seconds: float = 0.0,
        sleep_fn: Callable[[float], None] = time.sleep,
        random_fn: Callable[[float, float], float] = random.uniform,
    ):
        if base_seconds < 0 or jitter_seconds < 0:
            raise ValueError("delay and jitter must not be negative")
        self.base_seconds = float(base_seconds)
        self.jitter_seconds = float(jitter_seconds)
        self._sleep = sleep_fn
        self._random = random_fn

    @classmethod
    def from_milliseconds(cls, delay_ms: int, jitter_ms: int = 0, **kwargs) -> "RateLimiter":
        return cls(delay_ms / 1000.0, jitter_ms / 1000.0, **kwargs)

    def next_delay(self) -> float:
        if self.jitter_seconds > 0:
            return self.base_seconds + self._random(0.0, self.jitter_seconds)
        return self.base_seconds

    def wait(self) -> float:
        """Block until the next request may be sent; return the seconds waited."""
        delay = self.next_delay()
        if delay > 0:
            logger.debug("Waiting %.3fs before next request", delay)
            self._sleep(delay)
        return delay
