"""Single-member gzip reader.

MemberReader consumes a concatenated gzip stream one member per call. Unlike
gzip.GzipFile it never merges consecutive members, it bounds the output kept
for each member, and it keeps whatever bytes follow a member trailer for the
next call.
"""

from __future__ import annotations

import logging
import zlib
from dataclasses import dataclass
from typing import BinaryIO

from ..config import READ_SIZE_DEFAULT, OversizePolicy
from ..exceptions import (
    BlobSizeLimitExceeded,
    FormatError,
    SourceIOError,
    TruncatedStreamError,
)

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"

# wbits for a single gzip-wrapped deflate stream
GZIP_WBITS = 16 + zlib.MAX_WBITS


@dataclass(frozen=True)
class Member:
    """One member as read from the stream.

    Attributes:
        index: Zero-based position of the member in the stream
        offset: Byte offset of the member header in the stream
        compressed_size: Size of the member on the wire, header and trailer included
        body: Decompressed body, at most the configured limit
        truncated: True if the body was cut at the limit
    """

    index: int
    offset: int
    compressed_size: int
    body: bytes
    truncated: bool = False


class MemberReader:
    """Reads gzip members one at a time from a binary source.

    The reader does not own ``source``; close() only drops the decompressor
    state and the buffered bytes.

    Example:
        >>> import gzip, io
        >>> reader = MemberReader(io.BytesIO(gzip.compress(b"a") + gzip.compress(b"b")))
        >>> reader.read_member(16).body
        b'a'
        >>> reader.read_member(16).body
        b'b'
        >>> reader.at_end()
        True
    """

    def __init__(self, source: BinaryIO, read_size: int = READ_SIZE_DEFAULT) -> None:
        if read_size <= 0:
            raise ValueError(f"read_size must be > 0, got {read_size}")

        self._source = source
        self._read_size = read_size
        self._pending = b""
        self._decompressor: zlib._Decompress | None = None
        self._total_read = 0
        self._closed = False
        self.members_read = 0

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def offset(self) -> int:
        """Stream offset of the next unconsumed byte."""
        return self._total_read - len(self._pending)

    def at_end(self) -> bool:
        """Return True if the source is cleanly exhausted at a member boundary.

        Raises:
            SourceIOError: If reading the source fails
        """
        self._check_open()
        if not self._pending:
            self._pending = self._read()
        return not self._pending

    def read_member(self, limit: int, on_oversize: OversizePolicy = "truncate") -> Member:
        """Read the next member.

        Output beyond ``limit`` bytes is never kept. With ``on_oversize="truncate"``
        the rest of the member is still decompressed, in bounded steps, and
        discarded so that the reader ends up on the next member boundary.

        Args:
            limit: Maximum number of body bytes to keep (must be > 0)
            on_oversize: "truncate" or "raise"

        Returns:
            The member read

        Raises:
            FormatError: If the bytes are not a valid gzip member
            TruncatedStreamError: If the source ends inside the member
            SourceIOError: If reading the source fails
            BlobSizeLimitExceeded: If the body exceeds ``limit`` and on_oversize is "raise"
        """
        self._check_open()
        if limit <= 0:
            raise ValueError(f"limit must be > 0, got {limit}")

        index = self.members_read
        start = self.offset

        self._fill(len(GZIP_MAGIC))
        if not self._pending:
            raise TruncatedStreamError(f"No member at offset {start}")
        if len(self._pending) < len(GZIP_MAGIC):
            raise TruncatedStreamError(f"Stream ended inside the header of member {index}")
        if self._pending[: len(GZIP_MAGIC)] != GZIP_MAGIC:
            raise FormatError(
                f"Invalid gzip magic at offset {start}: {self._pending[:2].hex()}"
            )

        decompressor = zlib.decompressobj(wbits=GZIP_WBITS)
        self._decompressor = decompressor

        body = bytearray()
        truncated = False
        output_full = False
        data = self._pending
        self._pending = b""

        while not decompressor.eof:
            if not data:
                data = self._read()
                # A full output buffer may still hold buffered input to process
                if not data and not output_full:
                    raise TruncatedStreamError(
                        f"Stream ended inside member {index} (offset {start})"
                    )

            room = limit - len(body)
            # max_length=0 means unbounded, so discard in read_size steps
            max_length = room if room > 0 else self._read_size
            try:
                chunk = decompressor.decompress(data, max_length)
            except zlib.error as err:
                raise FormatError(f"Corrupt member {index} at offset {start}: {err}") from err
            output_full = len(chunk) == max_length

            if room > 0:
                body += chunk
            elif chunk:
                if on_oversize == "raise":
                    raise BlobSizeLimitExceeded(limit, index)
                truncated = True

            data = decompressor.unconsumed_tail

        self._pending = decompressor.unused_data
        self._decompressor = None
        self.members_read += 1

        if truncated:
            logger.warning("Member %d truncated to max_blob_size=%d bytes", index, limit)

        return Member(
            index=index,
            offset=start,
            compressed_size=self.offset - start,
            body=bytes(body),
            truncated=truncated,
        )

    def close(self) -> None:
        """Release decompressor state and buffered bytes. Idempotent."""
        if self._closed:
            return
        self._closed = True
        self._decompressor = None
        self._pending = b""
        logger.debug("Member reader released after %d members", self.members_read)

    def __enter__(self) -> MemberReader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("I/O operation on closed MemberReader")

    def _fill(self, size: int) -> None:
        """Buffer at least ``size`` bytes, or as many as the source still has."""
        while len(self._pending) < size:
            data = self._read()
            if not data:
                return
            self._pending += data

    def _read(self) -> bytes:
        try:
            data = self._source.read(self._read_size)
        except OSError as err:
            raise SourceIOError(f"Failed to read from source: {err}") from err

        if not data:
            return b""
        self._total_read += len(data)
        return bytes(data)
