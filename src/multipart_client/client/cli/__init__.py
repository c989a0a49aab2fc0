"""Command-line interface for multipart uploads.

Commands:
- upload: Upload a file as a multipart upload
- configure: Save default settings to the config file
"""

from __future__ import annotations

import click

from multipart_client.client.cli.config import (
    get_config_dir,
    get_config_file,
    load_config,
    resolve_config,
    save_config,
    update_config,
)
from multipart_client.client.cli.upload import configure, upload


@click.group()
@click.version_option(package_name="multipart-client")
def cli() -> None:
    """multipart-client - Resumable multipart uploads over presigned URLs."""


cli.add_command(upload)
cli.add_command(configure)

__all__ = [
    "cli",
    "configure",
    "get_config_dir",
    "get_config_file",
    "load_config",
    "resolve_config",
    "save_config",
    "update_config",
    "upload",
]
