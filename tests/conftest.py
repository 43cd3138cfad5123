"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io

import pytest

from blobgzip import encode_blobs


class CountingSource(io.RawIOBase):
    """Readable source that counts reads and fails past a read budget."""

    def __init__(self, data: bytes, max_reads: int | None = None) -> None:
        self._data = io.BytesIO(data)
        self.max_reads = max_reads
        self.reads = 0

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        self.reads += 1
        if self.max_reads is not None and self.reads > self.max_reads:
            raise OSError("read past expected position")
        return self._data.read(size)


class FailingSink(io.RawIOBase):
    """Writable sink that raises OSError once ``limit`` bytes were accepted."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.data = bytearray()

    def writable(self) -> bool:
        return True

    def write(self, b: bytes) -> int:
        if len(self.data) + len(b) > self.limit:
            raise OSError("disk full")
        self.data += b
        return len(b)


@pytest.fixture
def sample_blob() -> bytes:
    """Sample blob for testing."""
    return b"helo"


@pytest.fixture
def sample_blobs() -> list[bytes]:
    """A few blobs of different shapes, including an empty one."""
    return [b"helo", b"", b"\x00" * 1000, bytes(range(256)), b"world"]


@pytest.fixture
def sample_stream(sample_blobs: list[bytes]) -> bytes:
    """Encoded stream of sample_blobs."""
    return encode_blobs(sample_blobs)


@pytest.fixture
def counting_source() -> type[CountingSource]:
    """Factory for sources that count (and optionally limit) reads."""
    return CountingSource


@pytest.fixture
def failing_sink() -> type[FailingSink]:
    """Factory for sinks that fail after a byte budget."""
    return FailingSink
