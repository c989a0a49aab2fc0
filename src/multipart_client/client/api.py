"""HTTP client for the multipart upload server.

This module provides:
- MultipartAPI: Async client for the four remote upload operations
  (start, presign, put part, complete)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import httpx

from multipart_client.core.config import MultipartConfig
from multipart_client.core.types import UploadPart
from multipart_client.errors import (
    PartUploadError,
    PresignedUrlError,
    RemoteOperationError,
    UploadCompleteError,
    UploadStartError,
)

logger = logging.getLogger(__name__)


class MultipartAPI:
    """Async HTTP client for the multipart upload endpoints."""

    def __init__(
        self,
        config: MultipartConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            config: Upload configuration (base URL, timeout, SSL settings).
            client: Optional pre-built httpx client; closed by close() only
                when created here.
        """
        self._config = config
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.timeout,
            verify=config.verify_ssl,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> MultipartAPI:
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Async context manager exit."""
        await self.close()

    async def _request(
        self,
        error_cls: type[RemoteOperationError],
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Send a request, mapping transport errors and non-2xx responses to error_cls."""
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise error_cls(f"{error_cls.default_message}: {e}") from e
        if not response.is_success:
            logger.debug(f"{method} {url} returned {response.status_code}")
            raise error_cls(status_code=response.status_code)
        return response

    @staticmethod
    def _json_field(
        response: httpx.Response, key: str, error_cls: type[RemoteOperationError]
    ) -> str:
        """Extract a string field from a JSON response body."""
        try:
            value = response.json()[key]
        except (ValueError, KeyError, TypeError) as e:
            raise error_cls(
                f"{error_cls.default_message}: response has no '{key}'",
                response.status_code,
            ) from e
        return str(value)

    # === Remote upload operations ===

    async def start_upload(self, file_name: str) -> str:
        """Initiate a multipart upload.

        Args:
            file_name: Name of the object to create.

        Returns:
            Upload id assigned by the server.

        Raises:
            UploadStartError: If the server rejects the request.
        """
        response = await self._request(
            UploadStartError,
            "POST",
            "/start-multipart-upload",
            json={"fileName": file_name},
        )
        upload_id = self._json_field(response, "uploadId", UploadStartError)
        logger.debug(f"Started multipart upload {upload_id} for {file_name}")
        return upload_id

    async def get_presigned_url(
        self, file_name: str, upload_id: str, part_number: int
    ) -> str:
        """Get a pre-authorized URL for uploading one part.

        Raises:
            PresignedUrlError: If the server rejects the request.
        """
        response = await self._request(
            PresignedUrlError,
            "GET",
            "/generate-presigned-url",
            params={
                "fileName": file_name,
                "uploadId": upload_id,
                "partNumber": part_number,
            },
        )
        return self._json_field(response, "url", PresignedUrlError)

    async def upload_part(self, url: str, data: bytes) -> str:
        """PUT the bytes of one part to its presigned URL.

        Args:
            url: Absolute presigned URL.
            data: Part bytes.

        Returns:
            The part's ETag with surrounding quotes removed.

        Raises:
            PartUploadError: If the PUT fails or no ETag is returned.
        """
        response = await self._request(PartUploadError, "PUT", url, content=data)
        etag = response.headers.get("etag")
        if not etag:
            raise PartUploadError(
                "Failed to upload part: response has no ETag header",
                response.status_code,
            )
        return etag.replace('"', "")

    async def complete_upload(
        self, file_name: str, upload_id: str, parts: Iterable[UploadPart]
    ) -> Any:
        """Complete a multipart upload.

        Args:
            file_name: Name of the object.
            upload_id: Upload id returned by start_upload().
            parts: Confirmed parts, in the order they must be assembled.

        Returns:
            The server's completion payload.

        Raises:
            UploadCompleteError: If the server rejects the request.
        """
        response = await self._request(
            UploadCompleteError,
            "POST",
            "/complete-multipart-upload",
            json={
                "fileName": file_name,
                "uploadId": upload_id,
                "parts": [part.to_dict() for part in parts],
            },
        )
        try:
            return response.json()
        except ValueError as e:
            raise UploadCompleteError(
                "Failed to complete upload: invalid response body",
                response.status_code,
            ) from e
