"""Settings file for the CLI.

Defaults live in ~/.multipart-client/config.json as MultipartConfig fields.
Options given on the command line override the stored values.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from multipart_client.core.config import MultipartConfig, normalize_config

CONFIG_DIR_NAME = ".multipart-client"
CONFIG_FILE_NAME = "config.json"


def get_config_dir() -> Path:
    """Get the directory holding the settings file."""
    return Path.home() / CONFIG_DIR_NAME


def get_config_file() -> Path:
    return get_config_dir() / CONFIG_FILE_NAME


def load_config() -> dict[str, Any]:
    """Load stored settings, normalized to MultipartConfig field names.

    A file written with camelCase keys (baseURL, partSize, delay in
    milliseconds) is read the same way MultipartConfig.from_dict reads it.
    """
    config_file = get_config_file()
    if not config_file.exists():
        return {}
    return normalize_config(json.loads(config_file.read_text()))


def save_config(config: dict[str, Any]) -> None:
    config_file = get_config_file()
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(json.dumps(config, indent=2))


def resolve_config(**overrides: Any) -> MultipartConfig:
    """Build the upload config from stored settings and command-line options.

    Options left as None fall back to the stored value, then to the
    MultipartConfig default.

    Raises:
        ValueError: If no base URL is known or a value is invalid.
    """
    values = load_config()
    values.update(_given(overrides))
    return MultipartConfig.from_dict(values)


def update_config(**settings: Any) -> dict[str, Any]:
    """Validate settings and merge them into the settings file.

    Returns:
        The settings now stored.

    Raises:
        ValueError: If the merged settings are invalid; nothing is written.
    """
    values = load_config()
    values.update(_given(settings))
    MultipartConfig.from_dict(values)
    save_config(values)
    return values


def _given(options: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in options.items() if value is not None}
