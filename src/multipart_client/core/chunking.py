"""Fixed-size part windows for multipart uploads.

Part N (1-based) covers bytes ``[(N - 1) * part_size, N * part_size)``,
clamped to the file size. The remote store expects exactly this numbering.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

DEFAULT_PART_SIZE = 5 * 1024 * 1024  # 5 MiB


@dataclass(frozen=True)
class PartWindow:
    """Byte range of one part."""

    part_number: int
    start: int
    end: int

    @property
    def size(self) -> int:
        """Return the size of this part in bytes."""
        return self.end - self.start


def part_count(total_size: int, part_size: int = DEFAULT_PART_SIZE) -> int:
    """Number of parts needed to cover ``total_size`` bytes.

    Raises:
        ValueError: If part_size is not positive or total_size is negative.
    """
    if part_size <= 0:
        raise ValueError(f"part_size must be positive, got {part_size}")
    if total_size < 0:
        raise ValueError(f"total_size cannot be negative, got {total_size}")
    return math.ceil(total_size / part_size)


def iter_part_windows(
    total_size: int, part_size: int = DEFAULT_PART_SIZE
) -> Iterator[PartWindow]:
    """Yield the windows of parts 1..N in ascending order.

    Args:
        total_size: Size of the file in bytes.
        part_size: Bytes per part (the last part may be shorter).

    Yields:
        PartWindow objects covering the file without gaps or overlap.
    """
    for index in range(part_count(total_size, part_size)):
        start = index * part_size
        yield PartWindow(
            part_number=index + 1,
            start=start,
            end=min(start + part_size, total_size),
        )
