"""Client factory binding shared configuration to per-file uploaders."""

from __future__ import annotations

import logging
from pathlib import Path

from multipart_client.client.api import MultipartAPI
from multipart_client.client.uploader import MultipartUploader
from multipart_client.core.config import MultipartConfig
from multipart_client.core.source import FileSource, LocalFile

logger = logging.getLogger(__name__)


class MultipartClient:
    """Creates MultipartUploader sessions that share one HTTP client."""

    def __init__(
        self,
        config: MultipartConfig,
        api: MultipartAPI | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Base URL, part size and retry settings.
            api: Optional API client; one is created from config otherwise.
        """
        self._config = config
        self._api = api or MultipartAPI(config)

    @property
    def config(self) -> MultipartConfig:
        return self._config

    def uploader(self, file: FileSource | str | Path | None) -> MultipartUploader:
        """Create an upload session for one file.

        Args:
            file: A FileSource, or a path that is wrapped in LocalFile.
        """
        if isinstance(file, (str, Path)):
            file = LocalFile(file)
        logger.debug(f"Creating uploader for {file!r}")
        return MultipartUploader(file, self._config, self._api)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._api.close()

    async def __aenter__(self) -> MultipartClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Async context manager exit."""
        await self.close()
