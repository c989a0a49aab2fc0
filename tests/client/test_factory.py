"""Tests for MultipartClient and end-to-end uploads over HTTP."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from multipart_client.client.factory import MultipartClient
from multipart_client.core.config import MultipartConfig
from multipart_client.core.source import BytesFile, LocalFile
from multipart_client.core.types import UploadStatus
from multipart_client.errors import PartUploadError
from tests.client.fakes import FakeAPI

BASE_URL = "https://api.example.com"
UPLOAD_ID = "123456789"
PART_URL = "https://bucket.example.com/test.txt?partNumber=1"


def make_config(**overrides: object) -> MultipartConfig:
    """Create a config with no backoff delay."""
    values: dict[str, object] = {"base_url": BASE_URL, "delay": 0}
    values.update(overrides)
    return MultipartConfig(**values)  # type: ignore[arg-type]


class TestMultipartClient:
    """Tests for the client factory."""

    def test_uploader_wraps_paths(self, tmp_path: Path) -> None:
        """A path should be wrapped in LocalFile."""
        client = MultipartClient(make_config(), api=FakeAPI())  # type: ignore[arg-type]

        uploader = client.uploader(tmp_path / "file.bin")

        assert isinstance(uploader.file, LocalFile)
        assert uploader.file.name == "file.bin"
        assert uploader.status == UploadStatus.IDLE

    def test_uploader_per_file(self) -> None:
        """Each call should create an independent session."""
        client = MultipartClient(make_config(), api=FakeAPI())  # type: ignore[arg-type]
        source = BytesFile(b"abc", "a.txt")

        first = client.uploader(source)
        second = client.uploader(source)

        assert first is not second
        first.pause()
        assert second.status == UploadStatus.IDLE

    @pytest.mark.asyncio
    async def test_sessions_share_config(self) -> None:
        """Uploaders should use the client's part size."""
        fake_api = FakeAPI()
        client = MultipartClient(make_config(part_size=4), api=fake_api)  # type: ignore[arg-type]

        await client.uploader(BytesFile(b"0123456789", "digits.txt")).upload_file()

        assert fake_api.received == {1: b"0123", 2: b"4567", 3: b"89"}


class TestEndToEnd:
    """Uploads through the real HTTP client against mocked endpoints."""

    def add_start_and_presign(self, httpx_mock) -> None:  # type: ignore[no-untyped-def]
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/start-multipart-upload",
            json={"uploadId": UPLOAD_ID},
        )
        httpx_mock.add_response(
            method="GET",
            url=(
                f"{BASE_URL}/generate-presigned-url"
                f"?fileName=test.txt&uploadId={UPLOAD_ID}&partNumber=1"
            ),
            json={"url": PART_URL},
        )

    @pytest.mark.asyncio
    async def test_upload_lifecycle(self, httpx_mock) -> None:  # type: ignore[no-untyped-def]
        """A small file should go through start, one part, and complete."""
        self.add_start_and_presign(httpx_mock)
        httpx_mock.add_response(method="PUT", url=PART_URL, headers={"ETag": '"abc123"'})
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/complete-multipart-upload",
            json={"location": f"{BASE_URL}/files/test.txt"},
        )
        on_progress = MagicMock()
        on_complete = MagicMock()

        async with MultipartClient(make_config()) as client:
            uploader = client.uploader(BytesFile(b"test content", "test.txt"))
            uploader.set_on_progress(on_progress)
            uploader.set_on_complete(on_complete)
            result = await uploader.upload_file()

        assert result == {"location": f"{BASE_URL}/files/test.txt"}
        assert uploader.status == UploadStatus.COMPLETED
        on_complete.assert_called_once_with()
        info = on_progress.call_args.args[0]
        assert info.percentage == 100
        assert info.total_bytes == len(b"test content")

        complete_request = httpx_mock.get_requests()[-1]
        assert json.loads(complete_request.content)["parts"] == [
            {"PartNumber": 1, "ETag": "abc123"}
        ]

    @pytest.mark.asyncio
    async def test_put_failing_three_times(self, httpx_mock) -> None:  # type: ignore[no-untyped-def]
        """Three non-2xx PUTs with retries=3 should surface PartUploadError."""
        self.add_start_and_presign(httpx_mock)
        for _ in range(3):
            httpx_mock.add_response(method="PUT", url=PART_URL, status_code=503)
        on_error = MagicMock()

        async with MultipartClient(make_config(retries=3)) as client:
            uploader = client.uploader(BytesFile(b"test content", "test.txt"))
            uploader.set_on_error(on_error)
            with pytest.raises(PartUploadError):
                await uploader.upload_file()

        assert uploader.status == UploadStatus.ERROR
        on_error.assert_called_once()
        error = on_error.call_args.args[0]
        assert isinstance(error, PartUploadError)
        assert error.status_code == 503
        assert len(httpx_mock.get_requests(method="PUT")) == 3
