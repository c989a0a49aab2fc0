"""Resumable multipart uploads over presigned URLs."""

from multipart_client.client import MultipartAPI, MultipartClient, MultipartUploader, retry
from multipart_client.core import (
    BytesFile,
    FileSource,
    LocalFile,
    MultipartConfig,
    ProgressInfo,
    UploadPart,
    UploadState,
    UploadStatus,
)
from multipart_client.errors import (
    EmptyFileError,
    MultipartError,
    NoFileError,
    PartUploadError,
    PresignedUrlError,
    RemoteOperationError,
    UploadCompleteError,
    UploadStartError,
)

__version__ = "0.1.0"

__all__ = [
    "BytesFile",
    "EmptyFileError",
    "FileSource",
    "LocalFile",
    "MultipartAPI",
    "MultipartClient",
    "MultipartConfig",
    "MultipartError",
    "MultipartUploader",
    "NoFileError",
    "PartUploadError",
    "PresignedUrlError",
    "ProgressInfo",
    "RemoteOperationError",
    "UploadCompleteError",
    "UploadPart",
    "UploadStartError",
    "UploadState",
    "UploadStatus",
    "retry",
]
