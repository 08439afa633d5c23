"""Scoped timers for outbound calls."""

import logging
import threading
import time
from typing import Callable, Optional


logger = logging.getLogger(__name__)


class CallTimer:
    """
    Times one outbound call into a histogram series.

    The start time is taken on construction. The first ``close()`` records
    the elapsed seconds; later calls do nothing and return None. Used as a
    context manager the observation is recorded on every exit path,
    including exceptions.
    """

    def __init__(self, histogram, clock: Callable[[], float] = time.perf_counter):
        """
        Start the timer.

        Args:
            histogram: Labeled histogram child (anything with ``observe``)
            clock: Monotonic clock returning seconds
        """
        self._histogram = histogram
        self._clock = clock
        self._lock = threading.Lock()
        self._closed = False
        self.started_at = clock()
        self.duration: Optional[float] = None

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> Optional[float]:
        """
        Stop the timer and record the observation.

        Returns:
            Elapsed seconds, or None if the timer was already closed
        """
        with self._lock:
            if self._closed:
                logger.debug("Timer already closed, observation not recorded again")
                return None
            self._closed = True
            self.duration = max(self._clock() - self.started_at, 0.0)

        self._histogram.observe(self.duration)
        return self.duration

    def __enter__(self) -> "CallTimer":
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
