"""In-memory fake of the remote upload operations."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from multipart_client.core.types import UploadPart
from multipart_client.errors import (
    PartUploadError,
    PresignedUrlError,
    RemoteOperationError,
    UploadCompleteError,
    UploadStartError,
)

MiB = 1024 * 1024


class FakeAPI:
    """In-memory stand-in for MultipartAPI that records every call.

    Failures are injected per operation ("start", "presign", "put",
    "complete") as a count of consecutive failing calls.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []
        self.received: dict[int, bytes] = {}
        self.completed_parts: list[UploadPart] | None = None
        self.failures: dict[str, int] = {}
        self.put_hook: Callable[[int], Awaitable[None]] | None = None
        self._uploads = 0

    def fail(self, operation: str, times: int) -> None:
        self.failures[operation] = times

    def _maybe_fail(self, operation: str, error_cls: type[RemoteOperationError]) -> None:
        remaining = self.failures.get(operation, 0)
        if remaining > 0:
            self.failures[operation] = remaining - 1
            raise error_cls(status_code=500)

    def count(self, operation: str) -> int:
        return sum(1 for name, _ in self.calls if name == operation)

    def part_numbers(self, operation: str) -> list[int]:
        return [arg for name, arg in self.calls if name == operation]

    async def start_upload(self, file_name: str) -> str:
        self.calls.append(("start", file_name))
        self._maybe_fail("start", UploadStartError)
        self._uploads += 1
        return f"upload-{self._uploads}"

    async def get_presigned_url(
        self, file_name: str, upload_id: str, part_number: int
    ) -> str:
        self.calls.append(("presign", part_number))
        self._maybe_fail("presign", PresignedUrlError)
        return f"https://bucket.test/{upload_id}/{part_number}"

    async def upload_part(self, url: str, data: bytes) -> str:
        part_number = int(url.rsplit("/", 1)[1])
        self.calls.append(("put", part_number))
        if self.put_hook:
            await self.put_hook(part_number)
        self._maybe_fail("put", PartUploadError)
        self.received[part_number] = data
        return f"etag-{part_number}"

    async def complete_upload(
        self, file_name: str, upload_id: str, parts: Iterable[UploadPart]
    ) -> Any:
        parts = list(parts)
        self.calls.append(("complete", [p.part_number for p in parts]))
        self._maybe_fail("complete", UploadCompleteError)
        self.completed_parts = parts
        return {"status": "success", "uploadId": upload_id}

    async def close(self) -> None:
        pass


