"""Exception hierarchy for blobgzip.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BlobGzipError for easy catching of any blobgzip-specific error.
"""

from __future__ import annotations


class BlobGzipError(Exception):
    """Base exception for all blobgzip errors."""

    pass


class SourceIOError(BlobGzipError):
    """Raised when reading from the byte source fails.

    The underlying OSError is available as ``__cause__``.
    """

    pass


class SinkIOError(BlobGzipError):
    """Raised when writing a member to the byte sink fails.

    The underlying OSError is available as ``__cause__``.
    """

    pass


class FormatError(BlobGzipError):
    """Raised when the stream does not hold a valid gzip member.

    Examples:
        - Bytes at a member boundary do not start with the gzip magic
        - Corrupted deflate data
        - CRC-32 or length trailer mismatch
    """

    pass


class TruncatedStreamError(FormatError):
    """Raised when the source ends in the middle of a member."""

    pass


class BlobSizeLimitExceeded(BlobGzipError):
    """Raised in strict mode when a member expands beyond max_blob_size."""

    def __init__(self, limit: int, index: int) -> None:
        self.limit = limit
        self.index = index
        super().__init__(f"Blob {index} exceeds max_blob_size={limit} bytes")


class CompositeError(BlobGzipError):
    """Raised when a failure is followed by a failing cleanup.

    Both errors are kept, in the order they happened, so the cleanup failure
    never hides the original one.

    Attributes:
        errors: Tuple of (primary, cleanup) exceptions
    """

    def __init__(self, primary: BaseException, cleanup: BaseException) -> None:
        self.errors: tuple[BaseException, BaseException] = (primary, cleanup)
        super().__init__(f"{primary}; cleanup also failed: {cleanup}")

    @property
    def primary(self) -> BaseException:
        return self.errors[0]

    @property
    def cleanup(self) -> BaseException:
        return self.errors[1]


class SequenceConsumedError(BlobGzipError):
    """Raised when a BlobSequence is iterated a second time."""

    pass
