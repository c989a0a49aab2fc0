"""Shared types for multipart uploads.

This module provides:
- UploadStatus: Lifecycle state of an upload session
- UploadPart: A part acknowledged by the remote store
- UploadState: Upload id plus the ledger of confirmed part numbers
- ProgressInfo: Progress sample handed to progress observers
- Type aliases for observer callbacks
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class UploadStatus(str, Enum):
    """Status of an upload session.

    Transitions are driven only by the session's own methods.
    """

    IDLE = "IDLE"
    UPLOADING = "UPLOADING"
    PAUSED = "PAUSED"
    COMPLETED = "COMPLETED"
    ERROR = "ERROR"


@dataclass(frozen=True)
class UploadPart:
    """A confirmed part: its 1-based number and the ETag returned by the store."""

    part_number: int
    etag: str

    def to_dict(self) -> dict[str, Any]:
        """Wire representation used by the complete call."""
        return {"PartNumber": self.part_number, "ETag": self.etag}


@dataclass
class UploadState:
    """Remote upload id and the ledger of part numbers already confirmed."""

    upload_id: str = ""
    parts_uploaded: list[int] = field(default_factory=list)

    def has_part(self, part_number: int) -> bool:
        return part_number in self.parts_uploaded

    def mark_uploaded(self, part_number: int) -> None:
        """Record a confirmed part; recording it twice is a no-op."""
        if part_number not in self.parts_uploaded:
            self.parts_uploaded.append(part_number)


@dataclass
class ProgressInfo:
    """Progress sample emitted after each confirmed part.

    Attributes:
        percentage: Uploaded share of the file, rounded to a whole percent.
        uploaded_bytes: Bytes confirmed so far.
        total_bytes: Size of the file.
        speed: Bytes per second since the previous sample.
        remaining_time: Estimated seconds until all bytes are uploaded.
    """

    percentage: int
    uploaded_bytes: int
    total_bytes: int
    speed: float
    remaining_time: float


# Observer callbacks
ProgressCallback = Callable[[ProgressInfo], None]
CompleteCallback = Callable[[], None]
ErrorCallback = Callable[[Exception], None]
