"""Exception hierarchy for multipart uploads.

This module provides:
- MultipartError: Base class for everything raised by this package
- NoFileError, EmptyFileError: Input validation failures (no network activity)
- UploadStartError, PresignedUrlError, PartUploadError, UploadCompleteError:
  Remote steps that failed after exhausting their retry budget
"""

from __future__ import annotations


class MultipartError(Exception):
    """Base exception for multipart upload errors."""


class FileValidationError(MultipartError):
    """The file handed to an uploader cannot be uploaded."""


class NoFileError(FileValidationError):
    """No file was provided, or it no longer exists."""

    def __init__(self, message: str = "No file provided") -> None:
        super().__init__(message)


class EmptyFileError(FileValidationError):
    """The file has zero bytes."""

    def __init__(self, message: str = "File is empty") -> None:
        super().__init__(message)


class RemoteOperationError(MultipartError):
    """Base exception for a failed remote upload step."""

    default_message = "Remote operation failed"

    def __init__(
        self, message: str | None = None, status_code: int | None = None
    ) -> None:
        super().__init__(message or self.default_message)
        self.status_code = status_code


class UploadStartError(RemoteOperationError):
    """Initiating the multipart upload failed."""

    default_message = "Failed to start multipart upload"


class PresignedUrlError(RemoteOperationError):
    """Fetching the presigned URL for a part failed."""

    default_message = "Failed to get presigned url"


class PartUploadError(RemoteOperationError):
    """Uploading the bytes of a part failed."""

    default_message = "Failed to upload part"


class UploadCompleteError(RemoteOperationError):
    """Completing the multipart upload failed."""

    default_message = "Failed to complete upload"
