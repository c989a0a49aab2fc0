"""Configuration for multipart upload clients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from multipart_client.core.chunking import DEFAULT_PART_SIZE

DEFAULT_RETRIES = 3
DEFAULT_DELAY = 1.0  # seconds
DEFAULT_TIMEOUT = 30.0  # seconds

# Keys accepted by from_dict, including the camelCase spelling used by
# JavaScript clients of the same upload server.
_KEY_ALIASES = {
    "baseURL": "base_url",
    "baseUrl": "base_url",
    "partSize": "part_size",
    "verifySsl": "verify_ssl",
}


@dataclass
class MultipartConfig:
    """Settings shared by every uploader created from one client.

    Attributes:
        base_url: Base URL of the upload server (e.g., "https://files.example.com").
        part_size: Bytes per part; the last part may be shorter.
        retries: Maximum attempts per remote call (1 means no retry).
        delay: Base backoff in seconds; attempt n waits ``delay * n``.
        timeout: Request timeout in seconds.
        verify_ssl: Whether to verify SSL certificates.
    """

    base_url: str
    part_size: int = DEFAULT_PART_SIZE
    retries: int = DEFAULT_RETRIES
    delay: float = DEFAULT_DELAY
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True

    def __post_init__(self) -> None:
        """Normalize the base URL and validate numeric settings."""
        if not self.base_url:
            raise ValueError("base_url cannot be empty")
        self.base_url = self.base_url.rstrip("/")
        if self.part_size <= 0:
            raise ValueError(f"part_size must be positive, got {self.part_size}")
        if self.retries < 1:
            raise ValueError(f"retries must be at least 1, got {self.retries}")
        if self.delay < 0:
            raise ValueError(f"delay cannot be negative, got {self.delay}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MultipartConfig:
        """Create from a config dictionary (see normalize_config).

        Raises:
            ValueError: If base_url is missing or a value is invalid.
        """
        values = normalize_config(data)
        if "base_url" not in values:
            raise ValueError("base_url is required")
        return cls(**values)


def normalize_config(data: dict[str, Any]) -> dict[str, Any]:
    """Map a config dictionary onto MultipartConfig field names.

    Unknown keys and None values are dropped. snake_case keys take delay in
    seconds; "delayMs", or "delay" next to any camelCase key, is read as
    milliseconds and converted.
    """
    fields = MultipartConfig.__dataclass_fields__
    values: dict[str, Any] = {}
    for key, value in data.items():
        name = _KEY_ALIASES.get(key, key)
        if name in fields and value is not None:
            values[name] = value

    delay_ms = data.get("delayMs")
    if delay_ms is None and any(key in _KEY_ALIASES for key in data):
        delay_ms = data.get("delay")
    if delay_ms is not None:
        values["delay"] = delay_ms / 1000
    return values
