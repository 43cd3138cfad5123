"""Blob stream encoder.

This module provides encode_to_stream(), which writes one standalone gzip
member per blob to a binary sink, and the in-memory helper encode_blobs().
"""

from __future__ import annotations

import gzip
import io
import logging
from collections.abc import Iterable
from typing import BinaryIO

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import CompositeError, SinkIOError

logger = logging.getLogger(__name__)

BytesLike = bytes | bytearray | memoryview


def encode_to_stream(
    sink: BinaryIO,
    blobs: Iterable[BytesLike],
    *,
    config: CodecConfig | None = None,
) -> int:
    """Write every blob as its own gzip member.

    Members are written strictly in order. Each member is finalized (deflate
    data flushed, CRC-32 and length trailer written) before the next blob is
    requested from ``blobs``. If the producer raises, the exception propagates
    unchanged and nothing is written for the failed element, so the sink holds
    only complete members.

    Args:
        sink: Binary writable file object
        blobs: Iterable of bytes-like objects (BlobSequence, generator, list, ...)
        config: Codec configuration (compression level)

    Returns:
        Number of members written (0 for an empty sequence, which writes no bytes)

    Raises:
        SinkIOError: If writing a member to the sink fails
        CompositeError: If the body write failed and finalizing the member failed too
        TypeError: If a blob is not bytes-like

    Example:
        >>> import io
        >>> sink = io.BytesIO()
        >>> encode_to_stream(sink, [b"helo", b"world"])
        2
    """
    config = config or DEFAULT_CONFIG
    iterator = iter(blobs)
    count = 0

    while True:
        try:
            blob = next(iterator)
        except StopIteration:
            return count

        try:
            _write_member(sink, blob, config.compress_level)
        except BaseException:
            # Stop the producer we bailed out on; a finished one is left alone
            close = getattr(iterator, "close", None)
            if callable(close):
                close()
            raise

        logger.debug("Wrote member %d (%d bytes)", count, len(blob))
        count += 1


def encode_blobs(
    blobs: Iterable[BytesLike],
    *,
    config: CodecConfig | None = None,
) -> bytes:
    """Encode blobs into an in-memory stream.

    Example:
        >>> encode_blobs([])
        b''
    """
    sink = io.BytesIO()
    encode_to_stream(sink, blobs, config=config)
    return sink.getvalue()


def _write_member(sink: BinaryIO, blob: BytesLike, compress_level: int) -> None:
    """Write one complete gzip member holding ``blob``.

    Args:
        sink: Binary writable file object
        blob: Member body
        compress_level: zlib compression level

    Raises:
        SinkIOError: If opening, writing or finalizing the member fails
        CompositeError: If both the body write and the finalization fail
    """
    if not isinstance(blob, (bytes, bytearray, memoryview)):
        raise TypeError(f"Blob must be bytes-like, got {type(blob).__name__}")

    # mtime=0 and no file name keep the output deterministic
    try:
        member = gzip.GzipFile(
            filename="",
            mode="wb",
            compresslevel=compress_level,
            fileobj=sink,
            mtime=0,
        )
    except OSError as err:
        raise SinkIOError(f"Failed to write member header: {err}") from err

    try:
        member.write(blob)
    except OSError as err:
        write_error = SinkIOError(f"Failed to write member body: {err}")
        write_error.__cause__ = err
        try:
            member.close()
        except OSError as cleanup_err:
            raise CompositeError(write_error, cleanup_err) from err
        raise write_error from err

    try:
        member.close()
    except OSError as err:
        raise SinkIOError(f"Failed to finalize member: {err}") from err
