"""
timestamp.py - Unique Timestamp Generator

Issues millisecond timestamps that are unique per generator and never
decrease, e.g. for naming temporary resources. Safe to call from any thread.
"""

from typing import Callable, Optional
import logging
import threading
import time

from .models import NO_TIMESTAMP

logger = logging.getLogger(__name__)


def current_millis() -> int:
    """Wall-clock milliseconds since the Unix epoch"""
    return time.time_ns() // 1_000_000


class TimestampGenerator:
    """Unique timestamp generator"""

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        """
        Initialize generator

        Args:
            clock: Returns integer milliseconds since the epoch (default: wall clock)
        """
        self._clock = clock or current_millis
        self._lock = threading.Lock()
        self._last = NO_TIMESTAMP

    @property
    def last_issued(self) -> int:
        """Last value returned, or -1 if none"""
        return self._last

    def next(self) -> int:
        """
        Return a timestamp that differs from all previous ones

        Spins until the clock moves past the last issued value. If the clock
        went backwards, the last value plus one is issued instead.
        """
        with self._lock:
            now = self._clock()
            spins = 0
            while now == self._last:
                spins += 1
                now = self._clock()
            if spins:
                logger.debug("Waited %d clock reads for timestamp %d", spins, now)

            if now < self._last:
                logger.warning(
                    "Clock went backwards (%d < %d), issuing %d",
                    now, self._last, self._last + 1,
                )
                now = self._last + 1

            self._last = now
            return now

    __call__ = next


_default_generator: Optional[TimestampGenerator] = None
_default_lock = threading.Lock()


def default_generator() -> TimestampGenerator:
    """Process-wide generator, created on first use"""
    global _default_generator
    if _default_generator is None:
        with _default_lock:
            if _default_generator is None:
                _default_generator = TimestampGenerator()
    return _default_generator


def get_timestamp() -> int:
    """Shorthand for default_generator().next()"""
    return default_generator().next()
