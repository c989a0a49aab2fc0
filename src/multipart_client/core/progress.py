"""Progress, speed and ETA estimation for uploads.

Speed is the instantaneous rate between two consecutive samples, not an
average since the upload started.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from multipart_client.core.types import ProgressInfo


def percent_of(uploaded_bytes: int, total_bytes: int) -> int:
    """Whole percentage of ``total_bytes`` uploaded, rounding halves up."""
    if total_bytes <= 0:
        return 0
    return (uploaded_bytes * 200 + total_bytes) // (2 * total_bytes)


class ProgressEstimator:
    """Turns byte counters into ProgressInfo samples.

    Remembers the byte count and time of the previous sample; both are
    updated on every call to sample().
    """

    def __init__(
        self,
        total_bytes: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the estimator.

        Args:
            total_bytes: Size of the file being uploaded.
            clock: Source of timestamps in seconds.
        """
        self._total_bytes = total_bytes
        self._clock = clock
        self._previous_bytes = 0
        self._previous_time = clock()

    @property
    def total_bytes(self) -> int:
        return self._total_bytes

    def start(self, uploaded_bytes: int = 0) -> None:
        """Set the baseline for the next sample (e.g., when an upload (re)starts)."""
        self._previous_bytes = uploaded_bytes
        self._previous_time = self._clock()

    def reset(self) -> None:
        self.start(0)

    def sample(self, uploaded_bytes: int) -> ProgressInfo:
        """Compute progress for the current byte count and advance the baseline."""
        now = self._clock()
        elapsed = now - self._previous_time
        speed = (uploaded_bytes - self._previous_bytes) / elapsed if elapsed > 0 else 0.0
        remaining = self._total_bytes - uploaded_bytes
        remaining_time = remaining / speed if speed > 0 else 0.0

        self._previous_bytes = uploaded_bytes
        self._previous_time = now

        return ProgressInfo(
            percentage=percent_of(uploaded_bytes, self._total_bytes),
            uploaded_bytes=uploaded_bytes,
            total_bytes=self._total_bytes,
            speed=speed,
            remaining_time=remaining_time,
        )
