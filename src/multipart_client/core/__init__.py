"""Core data types and pure algorithms shared by the upload client."""

from multipart_client.core.chunking import PartWindow, iter_part_windows, part_count
from multipart_client.core.config import MultipartConfig, normalize_config
from multipart_client.core.progress import ProgressEstimator
from multipart_client.core.source import BytesFile, FileSource, LocalFile
from multipart_client.core.types import (
    ProgressInfo,
    UploadPart,
    UploadState,
    UploadStatus,
)

__all__ = [
    "BytesFile",
    "FileSource",
    "LocalFile",
    "MultipartConfig",
    "PartWindow",
    "ProgressEstimator",
    "ProgressInfo",
    "UploadPart",
    "UploadState",
    "UploadStatus",
    "iter_part_windows",
    "normalize_config",
    "part_count",
]
