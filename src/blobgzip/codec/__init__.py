"""Blob stream codec for blobgzip.

This module provides the encoder that writes one gzip member per blob and the
decoder that lazily reads members back as blobs.
"""

from __future__ import annotations

from .decoder import decode_blobs, decode_from_stream
from .encoder import encode_blobs, encode_to_stream
from .member import GZIP_MAGIC, Member, MemberReader

__all__ = [
    "encode_to_stream",
    "encode_blobs",
    "decode_from_stream",
    "decode_blobs",
    "Member",
    "MemberReader",
    "GZIP_MAGIC",
]
