"""Shared fixtures for upload client tests."""

from __future__ import annotations

import pytest

from multipart_client.core.config import MultipartConfig
from tests.client.fakes import MiB, FakeAPI


@pytest.fixture
def fake_api() -> FakeAPI:
    """Create a recording fake API."""
    return FakeAPI()


@pytest.fixture
def config() -> MultipartConfig:
    """Config with 5 MiB parts and no backoff delay."""
    return MultipartConfig(
        base_url="https://api.example.com",
        part_size=5 * MiB,
        retries=3,
        delay=0,
    )
