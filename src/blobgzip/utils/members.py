"""Stream inspection.

This module walks a blob stream member by member and reports sizes and
checksums without keeping the blobs around.
"""

from __future__ import annotations

import zlib
from collections.abc import Iterator
from typing import BinaryIO

from pydantic import BaseModel, ConfigDict

from ..codec.member import MemberReader
from ..config import DEFAULT_CONFIG, CodecConfig


class MemberStats(BaseModel):
    """Statistics for one member of a stream."""

    model_config = ConfigDict(frozen=True)

    index: int
    offset: int
    compressed_size: int
    blob_size: int
    crc32: int
    truncated: bool = False


class StreamSummary(BaseModel):
    """Totals over a whole stream."""

    model_config = ConfigDict(frozen=True)

    members: list[MemberStats]
    compressed_size: int
    blob_size: int

    @property
    def count(self) -> int:
        return len(self.members)

    @property
    def ratio(self) -> float:
        """Blob bytes per stream byte (1.0 for an empty stream)."""
        if self.compressed_size == 0:
            return 1.0
        return self.blob_size / self.compressed_size


def scan_members(
    source: BinaryIO,
    *,
    config: CodecConfig | None = None,
) -> Iterator[MemberStats]:
    """Yield statistics for every member of a stream.

    Args:
        source: Binary readable file object
        config: Codec configuration; max_blob_size bounds memory per member

    Yields:
        MemberStats in stream order. ``crc32`` and ``blob_size`` describe the
        blob as it would be decoded, i.e. after truncation.

    Raises:
        FormatError: If a member is invalid or corrupt
        SourceIOError: If reading the source fails
    """
    config = config or DEFAULT_CONFIG

    with MemberReader(source, read_size=config.read_size) as reader:
        while not reader.at_end():
            member = reader.read_member(config.max_blob_size, config.on_oversize)
            yield MemberStats(
                index=member.index,
                offset=member.offset,
                compressed_size=member.compressed_size,
                blob_size=len(member.body),
                crc32=zlib.crc32(member.body),
                truncated=member.truncated,
            )


def summarize_stream(
    source: BinaryIO,
    *,
    config: CodecConfig | None = None,
) -> StreamSummary:
    """Scan a whole stream and return its totals.

    Example:
        >>> import io
        >>> summarize_stream(io.BytesIO(b"")).count
        0
    """
    members = list(scan_members(source, config=config))
    return StreamSummary(
        members=members,
        compressed_size=sum(m.compressed_size for m in members),
        blob_size=sum(m.blob_size for m in members),
    )
