"""File handles that an uploader reads parts from.

This module provides:
- FileSource: Protocol for a named, sized, range-readable byte source
- LocalFile: A file on disk, read one range at a time
- BytesFile: An in-memory buffer
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSource(Protocol):
    """Read-only byte source with a known name and size."""

    @property
    def name(self) -> str: ...

    @property
    def size(self) -> int: ...

    def exists(self) -> bool: ...

    def read_range(self, start: int, end: int) -> bytes: ...


class LocalFile:
    """A file on the local filesystem.

    Only the requested range is read, so large files never have to fit in
    memory.
    """

    def __init__(self, path: str | Path, name: str | None = None) -> None:
        self._path = Path(path)
        self._name = name or self._path.name

    def __repr__(self) -> str:
        return f"LocalFile({str(self._path)!r})"

    @property
    def path(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        return self._name

    @property
    def size(self) -> int:
        return self._path.stat().st_size

    def exists(self) -> bool:
        return self._path.is_file()

    def read_range(self, start: int, end: int) -> bytes:
        """Read bytes ``[start, end)``; a range past EOF is truncated."""
        with self._path.open("rb") as f:
            f.seek(start)
            return f.read(max(0, end - start))


class BytesFile:
    """An in-memory byte buffer with a file name."""

    def __init__(self, data: bytes, name: str) -> None:
        self._data = bytes(data)
        self._name = name

    def __repr__(self) -> str:
        return f"BytesFile(name={self._name!r}, size={len(self._data)})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def size(self) -> int:
        return len(self._data)

    def exists(self) -> bool:
        return True

    def read_range(self, start: int, end: int) -> bytes:
        return self._data[start:end]
