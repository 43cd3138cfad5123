"""Codec configuration.

This module provides the CodecConfig model shared by the encoder, the decoder
and the CLI. A config is built once by the caller and passed explicitly.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

BLOB_SIZE_MAX_DEFAULT = 1_048_576
"""Default per-blob ceiling applied while decoding (1 MiB)."""

COMPRESS_LEVEL_DEFAULT = 6
READ_SIZE_DEFAULT = 64 * 1024

OversizePolicy = Literal["truncate", "raise"]


class CodecConfig(BaseModel):
    """Configuration for encoding and decoding blob streams.

    Attributes:
        max_blob_size: Byte ceiling for one decoded blob (default 1 MiB).
            Applied independently to every member.
        compress_level: zlib compression level used when writing members
            (0 = stored, 9 = best, default 6).
        read_size: Number of bytes requested from the source per read call.
        on_oversize: What the decoder does with a member larger than
            max_blob_size:
            - "truncate": keep the first max_blob_size bytes, discard the rest
              of the member and carry on (default)
            - "raise": raise BlobSizeLimitExceeded

    Examples:
        ```python
        from blobgzip import CodecConfig, decode_from_stream

        config = CodecConfig(max_blob_size=4096, on_oversize="raise")
        with open("records.gz", "rb") as f:
            for blob in decode_from_stream(f, config=config):
                ...
        ```
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_blob_size: int = Field(default=BLOB_SIZE_MAX_DEFAULT, gt=0)
    compress_level: int = Field(default=COMPRESS_LEVEL_DEFAULT, ge=0, le=9)
    read_size: int = Field(default=READ_SIZE_DEFAULT, gt=0)
    on_oversize: OversizePolicy = "truncate"

    @property
    def strict(self) -> bool:
        """True if oversized members raise instead of being truncated."""
        return self.on_oversize == "raise"


DEFAULT_CONFIG = CodecConfig()
