"""Blob stream decoder.

This module provides decode_from_stream(), which lazily turns a stream of
concatenated gzip members back into a BlobSequence, one blob per member.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator
from typing import BinaryIO

from ..config import BLOB_SIZE_MAX_DEFAULT, CodecConfig
from ..sequence import Blob, BlobSequence
from .member import MemberReader

logger = logging.getLogger(__name__)


def decode_from_stream(
    source: BinaryIO,
    max_blob_size: int | None = None,
    *,
    config: CodecConfig | None = None,
) -> BlobSequence:
    """Decode a concatenated gzip stream into a lazy blob sequence.

    Nothing is read from ``source`` until the first blob is requested. Every
    member becomes exactly one blob, capped at ``max_blob_size`` bytes. A
    zero-length source yields no blobs. The sequence ends without error only
    when the source is exhausted at a member boundary; any other failure is
    raised from ``next()`` and ends the sequence.

    Closing the returned sequence (or leaving its ``with`` block) stops
    decoding immediately. ``source`` itself is never closed.

    Args:
        source: Binary readable file object
        max_blob_size: Byte ceiling per blob (default 1 MiB); not allowed together
            with ``config``, which carries its own limit
        config: Codec configuration (limit, read size, oversize policy)

    Returns:
        Single-pass BlobSequence

    Raises:
        ValueError: If max_blob_size is not positive, or is given along with config

    The sequence may raise:
        FormatError: If a member is invalid or corrupt
        TruncatedStreamError: If the source ends inside a member
        SourceIOError: If reading the source fails
        BlobSizeLimitExceeded: If a member is too large and on_oversize is "raise"

    Example:
        ```python
        with open("blobs.gz", "rb") as f, decode_from_stream(f) as blobs:
            for blob in blobs:
                handle(blob)
        ```
    """
    if config is not None and max_blob_size is not None:
        raise ValueError("Pass max_blob_size or config, not both")

    if config is None:
        if max_blob_size is None:
            max_blob_size = BLOB_SIZE_MAX_DEFAULT
        if max_blob_size <= 0:
            raise ValueError(f"max_blob_size must be > 0, got {max_blob_size}")
        config = CodecConfig(max_blob_size=max_blob_size)

    return BlobSequence(_iter_members(source, config))


def decode_blobs(
    data: bytes,
    max_blob_size: int | None = None,
    *,
    config: CodecConfig | None = None,
) -> list[Blob]:
    """Decode an in-memory stream into a list of blobs.

    Example:
        >>> decode_blobs(b"")
        []
    """
    with decode_from_stream(io.BytesIO(data), max_blob_size, config=config) as blobs:
        return list(blobs)


def _iter_members(source: BinaryIO, config: CodecConfig) -> Iterator[Blob]:
    reader = MemberReader(source, read_size=config.read_size)
    try:
        while not reader.at_end():
            member = reader.read_member(config.max_blob_size, config.on_oversize)
            logger.debug(
                "Read member %d (%d compressed bytes, %d blob bytes)",
                member.index,
                member.compressed_size,
                len(member.body),
            )
            yield member.body
    finally:
        reader.close()
