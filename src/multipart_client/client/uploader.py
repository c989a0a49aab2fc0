"""Resumable multipart upload session for a single file.

This module provides:
- MultipartUploader: Drives initiate -> presign/PUT per part -> complete,
  with pause, resume and abort support

Parts are uploaded one at a time. Pause is checked before each part, so a
part that is already in flight always finishes. The ledger of confirmed
parts makes upload_file() safe to call again: confirmed parts are skipped.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from multipart_client.client.api import MultipartAPI
from multipart_client.client.retry import retry
from multipart_client.core.chunking import PartWindow, iter_part_windows, part_count
from multipart_client.core.config import MultipartConfig
from multipart_client.core.progress import ProgressEstimator
from multipart_client.core.source import FileSource
from multipart_client.core.types import (
    CompleteCallback,
    ErrorCallback,
    ProgressCallback,
    UploadPart,
    UploadState,
    UploadStatus,
)
from multipart_client.errors import EmptyFileError, NoFileError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MultipartUploader:
    """Uploads one file as a multipart upload.

    The session is the only writer of its state; drive it from one task at
    a time.
    """

    def __init__(
        self,
        file: FileSource | None,
        config: MultipartConfig,
        api: MultipartAPI,
    ) -> None:
        """Initialize the uploader.

        Args:
            file: File to upload.
            config: Part size and retry settings.
            api: Client for the remote upload operations.
        """
        self._file = file
        self._config = config
        self._api = api

        self._status = UploadStatus.IDLE
        self._upload_state = UploadState()
        self._parts: list[UploadPart] = []
        self._bytes_uploaded = 0
        self._progress: ProgressEstimator | None = None
        self._task: asyncio.Task[Any] | None = None

        self._on_progress: ProgressCallback | None = None
        self._on_complete: CompleteCallback | None = None
        self._on_error: ErrorCallback | None = None

    def __repr__(self) -> str:
        return f"MultipartUploader({self._file!r}, status={self._status.value})"

    # === State ===

    @property
    def file(self) -> FileSource | None:
        return self._file

    @property
    def status(self) -> UploadStatus:
        return self._status

    @property
    def upload_state(self) -> UploadState:
        """Copy of the upload id and ledger."""
        return UploadState(
            upload_id=self._upload_state.upload_id,
            parts_uploaded=list(self._upload_state.parts_uploaded),
        )

    @property
    def parts(self) -> list[UploadPart]:
        return list(self._parts)

    @property
    def bytes_uploaded(self) -> int:
        return self._bytes_uploaded

    @property
    def total_parts(self) -> int:
        if self._file is None or not self._file.exists():
            return 0
        return part_count(self._file.size, self._config.part_size)

    # === Observers (single slot, last registration wins) ===

    def set_on_progress(self, callback: ProgressCallback | None) -> None:
        self._on_progress = callback

    def set_on_complete(self, callback: CompleteCallback | None) -> None:
        self._on_complete = callback

    def set_on_error(self, callback: ErrorCallback | None) -> None:
        self._on_error = callback

    # === Lifecycle ===

    async def upload_file(self) -> Any:
        """Upload every part not yet confirmed, then complete the upload.

        Returns:
            The server's completion payload, or None if the upload was
            paused or aborted before completing.

        Raises:
            NoFileError, EmptyFileError: If the file cannot be uploaded.
            UploadStartError, PresignedUrlError, PartUploadError,
            UploadCompleteError: If a remote step fails after all retries.
        """
        self._task = asyncio.current_task()
        try:
            file = self._validate_file()
            file_name = file.name
            total_size = file.size

            self._status = UploadStatus.UPLOADING
            progress = self._progress
            if progress is None or progress.total_bytes != total_size:
                progress = self._progress = ProgressEstimator(total_size)
            progress.start(self._bytes_uploaded)

            if not self._upload_state.upload_id:
                self._upload_state.upload_id = await self._with_retry(
                    lambda: self._api.start_upload(file_name)
                )
                logger.info(
                    f"Started upload {self._upload_state.upload_id} for {file_name}"
                )

            for window in iter_part_windows(total_size, self._config.part_size):
                if self._status != UploadStatus.UPLOADING:
                    logger.info(
                        f"Upload for {file_name} stopped before part "
                        f"{window.part_number} ({self._status.value})"
                    )
                    break
                if self._upload_state.has_part(window.part_number):
                    continue
                await self._upload_part(file, window, progress)

            if self._status != UploadStatus.UPLOADING:
                return None

            result = await self._complete_upload(file_name)
            self._status = UploadStatus.COMPLETED
            logger.info(f"Upload for {file_name} completed: {result}")
            if self._on_complete:
                self._on_complete()
            return result

        except asyncio.CancelledError:
            # Cancelled by the caller rather than abort(): the ledger is kept
            # and resume() continues from the first unconfirmed part.
            if self._task is asyncio.current_task():
                self._status = UploadStatus.PAUSED
                logger.info(f"Upload for {self._describe_file()} was cancelled; paused.")
            raise
        except Exception as e:
            self._status = UploadStatus.ERROR
            logger.error(f"Upload for {self._describe_file()} failed: {e}")
            if self._on_error:
                self._on_error(e)
            raise
        finally:
            if self._task is asyncio.current_task():
                self._task = None

    def pause(self) -> None:
        """Stop before the next part; a part already in flight still finishes."""
        if self._status == UploadStatus.PAUSED:
            logger.info(f"Upload for {self._describe_file()} is already paused.")
            return
        self._status = UploadStatus.PAUSED
        logger.info(f"Upload for {self._describe_file()} has been paused.")

    async def resume(self) -> Any:
        """Continue a paused upload from the first unconfirmed part.

        Returns:
            Whatever upload_file() returns, or None if the upload was not paused.
        """
        if self._status != UploadStatus.PAUSED:
            logger.info(f"Upload for {self._describe_file()} is not paused.")
            return None
        self._status = UploadStatus.UPLOADING
        logger.info(f"Resuming upload for {self._describe_file()}...")

        # Paused while a part was still in flight: the running loop sees
        # UPLOADING again at the next boundary and carries on.
        task = self._task
        if task is not None and not task.done() and task is not _current_task():
            return await asyncio.shield(task)
        return await self.upload_file()

    def abort(self) -> None:
        """Cancel the running upload, if any, and reset to a fresh session.

        Requests already sent may still be processed by the server; the
        local state is reset regardless.
        """
        task = self._task
        if task is not None and not task.done() and task is not _current_task():
            task.cancel()
        self._task = None
        self._reset()
        logger.info(f"Upload for {self._describe_file()} has been aborted.")

    # === Internals ===

    def _validate_file(self) -> FileSource:
        file = self._file
        if file is None or not file.exists():
            raise NoFileError()
        if file.size == 0:
            raise EmptyFileError()
        return file

    def _reset(self) -> None:
        self._bytes_uploaded = 0
        self._parts = []
        self._upload_state = UploadState()
        self._status = UploadStatus.IDLE
        if self._progress is not None:
            self._progress.reset()

    def _describe_file(self) -> str:
        return self._file.name if self._file is not None else "<no file>"

    def _with_retry(self, operation: Callable[[], Awaitable[T]]) -> Awaitable[T]:
        return retry(
            operation,
            retries=self._config.retries,
            delay=self._config.delay,
        )

    async def _upload_part(
        self, file: FileSource, window: PartWindow, progress: ProgressEstimator
    ) -> None:
        """Presign, PUT and record one part."""
        file_name = file.name
        upload_id = self._upload_state.upload_id
        data = file.read_range(window.start, window.end)

        url = await self._with_retry(
            lambda: self._api.get_presigned_url(file_name, upload_id, window.part_number)
        )
        etag = await self._with_retry(lambda: self._api.upload_part(url, data))

        self._parts.append(UploadPart(part_number=window.part_number, etag=etag))
        self._upload_state.mark_uploaded(window.part_number)
        self._bytes_uploaded += len(data)
        logger.debug(
            f"Uploaded part {window.part_number} of {file_name} ({len(data)} bytes)"
        )

        info = progress.sample(self._bytes_uploaded)
        if self._on_progress:
            self._on_progress(info)

    async def _complete_upload(self, file_name: str) -> Any:
        upload_id = self._upload_state.upload_id
        parts = sorted(self._parts, key=lambda part: part.part_number)
        return await self._with_retry(
            lambda: self._api.complete_upload(file_name, upload_id, parts)
        )


def _current_task() -> asyncio.Task[Any] | None:
    try:
        return asyncio.current_task()
    except RuntimeError:
        return None
