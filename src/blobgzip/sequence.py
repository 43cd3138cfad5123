"""Single-pass lazy blob sequences.

A BlobSequence is the interchange type between producers, the codec and
consumers. Each step has one of three outcomes:

- a blob (``next()`` returns ``bytes``)
- an error (``next()`` raises; the sequence is closed afterwards)
- exhaustion (``next()`` raises ``StopIteration``)

A consumer that wants to stop early calls ``close()`` (or leaves a ``with``
block); the producer then runs its cleanup before ``close()`` returns.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import TracebackType

from .exceptions import SequenceConsumedError

Blob = bytes


class BlobSequence:
    """Lazy, single-pass, terminable ordered sequence of blobs.

    Wraps any iterable of bytes. Generators are the usual producers: closing
    the sequence closes the generator, which runs its ``finally`` blocks.

    Example:
        >>> seq = BlobSequence([b"a", b"b"])
        >>> list(seq)
        [b'a', b'b']
        >>> list(seq)
        Traceback (most recent call last):
        ...
        blobgzip.exceptions.SequenceConsumedError: BlobSequence can only be iterated once
    """

    def __init__(self, blobs: Iterable[Blob]) -> None:
        self._source = blobs
        self._iterator: Iterator[Blob] | None = None
        self._closed = False

    @classmethod
    def empty(cls) -> BlobSequence:
        """Return a sequence that is exhausted on the first step."""
        return cls(())

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> BlobSequence:
        # Live sequences are their own iterator; a finished one cannot restart
        if self._closed:
            raise SequenceConsumedError("BlobSequence can only be iterated once")
        return self

    def __next__(self) -> Blob:
        if self._closed:
            raise StopIteration
        if self._iterator is None:
            self._iterator = iter(self._source)

        try:
            return next(self._iterator)
        except BaseException:
            # StopIteration and errors are both terminal
            self.close()
            raise

    def close(self) -> None:
        """Stop the producer and release its resources. Idempotent."""
        if self._closed:
            return
        self._closed = True

        target = self._iterator if self._iterator is not None else self._source
        close = getattr(target, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> BlobSequence:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<BlobSequence {state}>"
