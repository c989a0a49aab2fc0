"""Upload commands for the CLI.

Commands:
- upload: Upload a file as a multipart upload
- configure: Save default settings to the config file
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Any

import click

from multipart_client.client.cli.config import resolve_config, update_config
from multipart_client.core.config import MultipartConfig
from multipart_client.core.types import ProgressInfo
from multipart_client.errors import MultipartError


def format_size(num_bytes: float) -> str:
    """Format a byte count for display (e.g., "5.0 MB")."""
    for unit in ("B", "KB", "MB", "GB"):
        if abs(num_bytes) < 1024:
            return f"{num_bytes:.1f} {unit}"
        num_bytes /= 1024
    return f"{num_bytes:.1f} TB"


def format_progress(info: ProgressInfo) -> str:
    """Format a progress sample as a single status line."""
    return (
        f"{info.percentage:3d}% "
        f"{format_size(info.uploaded_bytes)}/{format_size(info.total_bytes)} "
        f"at {format_size(info.speed)}/s, {info.remaining_time:.0f}s left"
    )


def setup_logging(verbose: bool) -> None:
    """Send package logs to stderr (WARNING by default, DEBUG if verbose)."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))

    package_logger = logging.getLogger("multipart_client")
    for existing in package_logger.handlers[:]:
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


async def run_upload(config: MultipartConfig, path: Path, show_progress: bool) -> Any:
    """Upload one file, aborting the session if the task is cancelled."""
    from multipart_client.client.factory import MultipartClient

    async with MultipartClient(config) as client:
        uploader = client.uploader(path)
        if show_progress:
            uploader.set_on_progress(
                lambda info: click.echo(f"\r{format_progress(info)}", nl=False)
            )
        try:
            return await uploader.upload_file()
        except asyncio.CancelledError:
            uploader.abort()
            raise
        finally:
            if show_progress:
                click.echo()


@click.command()
@click.argument(
    "file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--base-url", default=None, help="Upload server URL (e.g., https://files.example.com).")
@click.option("--part-size", type=int, default=None, help="Bytes per part (default: 5 MiB).")
@click.option("--retries", type=int, default=None, help="Maximum attempts per request (default: 3).")
@click.option("--delay", type=float, default=None, help="Base retry backoff in seconds (default: 1).")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logs.")
@click.option("--no-progress", is_flag=True, help="Disable the progress line.")
def upload(
    file: Path,
    base_url: str | None,
    part_size: int | None,
    retries: int | None,
    delay: float | None,
    verbose: bool,
    no_progress: bool,
) -> None:
    """Upload FILE as a multipart upload.

    Settings not given on the command line are read from the config file.
    """
    try:
        config = resolve_config(
            base_url=base_url, part_size=part_size, retries=retries, delay=delay
        )
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    setup_logging(verbose)

    try:
        result = asyncio.run(run_upload(config, file, show_progress=not no_progress))
    except MultipartError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("Upload aborted.", err=True)
        sys.exit(130)

    click.echo(f"Uploaded {file.name}")
    if result is not None and verbose:
        click.echo(f"Server response: {result}")


@click.command()
@click.option("--base-url", required=True, help="Upload server URL.")
@click.option("--part-size", type=int, default=None, help="Bytes per part.")
@click.option("--retries", type=int, default=None, help="Maximum attempts per request.")
@click.option("--delay", type=float, default=None, help="Base retry backoff in seconds.")
def configure(
    base_url: str,
    part_size: int | None,
    retries: int | None,
    delay: float | None,
) -> None:
    """Save default upload settings to the config file."""
    try:
        update_config(
            base_url=base_url, part_size=part_size, retries=retries, delay=delay
        )
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo("Configuration saved.")
