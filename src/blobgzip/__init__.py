"""blobgzip: Blob Sequences as Concatenated Gzip Members

A Python library that stores a sequence of opaque binary records ("blobs") as
one byte stream made of independent gzip members, one member per blob.
Producers can emit blobs one at a time; consumers read them back lazily with a
bounded amount of memory per blob.

Key Features:
- Standard RFC 1952 output (readable by gzip, zcat, gzip.decompress)
- Lazy, single-pass decoding with a per-blob size ceiling
- Clean end-of-stream vs. corrupt/truncated stream distinction
- Pydantic-based configuration

Quick Start:
    >>> import io
    >>> from blobgzip import decode_from_stream, encode_to_stream
    >>>
    >>> stream = io.BytesIO()
    >>> encode_to_stream(stream, [b"helo", b"world"])
    2
    >>> stream.seek(0)
    0
    >>> list(decode_from_stream(stream))
    [b'helo', b'world']
"""

from __future__ import annotations

from .codec import (
    Member,
    MemberReader,
    decode_blobs,
    decode_from_stream,
    encode_blobs,
    encode_to_stream,
)
from .config import BLOB_SIZE_MAX_DEFAULT, CodecConfig
from .exceptions import (
    BlobGzipError,
    BlobSizeLimitExceeded,
    CompositeError,
    FormatError,
    SequenceConsumedError,
    SinkIOError,
    SourceIOError,
    TruncatedStreamError,
)
from .sequence import Blob, BlobSequence
from .utils import MemberStats, StreamSummary, scan_members, summarize_stream

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Blob",
    "BlobSequence",
    "encode_to_stream",
    "encode_blobs",
    "decode_from_stream",
    "decode_blobs",
    "Member",
    "MemberReader",
    # Configuration
    "CodecConfig",
    "BLOB_SIZE_MAX_DEFAULT",
    # Exceptions
    "BlobGzipError",
    "SourceIOError",
    "SinkIOError",
    "FormatError",
    "TruncatedStreamError",
    "BlobSizeLimitExceeded",
    "CompositeError",
    "SequenceConsumedError",
    # Inspection
    "MemberStats",
    "StreamSummary",
    "scan_members",
    "summarize_stream",
    # Version
    "__version__",
]
