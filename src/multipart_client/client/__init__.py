"""Network-facing upload client: remote operations, retry, sessions."""

from multipart_client.client.api import MultipartAPI
from multipart_client.client.factory import MultipartClient
from multipart_client.client.retry import retry
from multipart_client.client.uploader import MultipartUploader

__all__ = [
    "MultipartAPI",
    "MultipartClient",
    "MultipartUploader",
    "retry",
]
