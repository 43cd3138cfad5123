"""Unit tests for BlobSequence."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from blobgzip import BlobSequence, SequenceConsumedError


def _tracked(blobs: list[bytes], released: list[bool]) -> Iterator[bytes]:
    try:
        yield from blobs
    finally:
        released.append(True)


class TestBlobSequence:
    """Test single-pass iteration."""

    def test_iterates_in_order(self) -> None:
        """Test items come out in producer order."""
        assert list(BlobSequence([b"a", b"b", b"c"])) == [b"a", b"b", b"c"]

    def test_empty(self) -> None:
        """Test the empty sequence is exhausted immediately."""
        seq = BlobSequence.empty()

        with pytest.raises(StopIteration):
            next(seq)
        assert seq.closed

    def test_second_iteration_rejected(self) -> None:
        """Test a sequence cannot be iterated twice."""
        seq = BlobSequence([b"a"])
        list(seq)

        with pytest.raises(SequenceConsumedError):
            iter(seq)

    def test_iter_returns_self(self) -> None:
        """Test a live sequence is its own iterator."""
        seq = BlobSequence([b"a"])
        it = iter(seq)

        assert it is seq
        assert iter(it) is it
        assert list(it) == [b"a"]

    def test_for_loop_resumes_after_break(self) -> None:
        """Test a second loop over a live sequence continues where the first stopped."""
        seq = BlobSequence([b"a", b"b", b"c"])
        for blob in seq:
            assert blob == b"a"
            break

        assert list(seq) == [b"b", b"c"]

    def test_next_without_iter(self) -> None:
        """Test next() works before any for loop."""
        seq = BlobSequence([b"a", b"b"])

        assert next(seq) == b"a"
        assert list(seq) == [b"b"]

    def test_exhaustion_closes_producer(self) -> None:
        """Test running to the end runs the producer's cleanup."""
        released: list[bool] = []
        seq = BlobSequence(_tracked([b"a"], released))

        assert list(seq) == [b"a"]
        assert seq.closed
        assert released == [True]

    def test_repr(self) -> None:
        """Test repr shows the state."""
        seq = BlobSequence([])
        assert "open" in repr(seq)
        seq.close()
        assert "closed" in repr(seq)


class TestBlobSequenceStop:
    """Test consumer-driven stop."""

    def test_close_stops_producer(self) -> None:
        """Test close() runs the generator's finally block before returning."""
        released: list[bool] = []
        seq = BlobSequence(_tracked([b"a", b"b", b"c"], released))

        assert next(seq) == b"a"
        seq.close()

        assert released == [True]
        with pytest.raises(StopIteration):
            next(seq)

    def test_close_idempotent(self) -> None:
        """Test closing twice is harmless."""
        released: list[bool] = []
        seq = BlobSequence(_tracked([b"a"], released))
        next(seq)

        seq.close()
        seq.close()

        assert released == [True]

    def test_close_before_start(self) -> None:
        """Test closing an unstarted generator-backed sequence closes the generator."""
        gen = _tracked([b"a"], [])
        seq = BlobSequence(gen)
        seq.close()

        with pytest.raises(StopIteration):
            next(gen)

    def test_context_manager(self) -> None:
        """Test leaving a with block closes the sequence."""
        released: list[bool] = []

        with BlobSequence(_tracked([b"a", b"b"], released)) as seq:
            for blob in seq:
                assert blob == b"a"
                break

        assert seq.closed
        assert released == [True]


class TestBlobSequenceErrors:
    """Test error steps are terminal."""

    def test_error_is_terminal(self) -> None:
        """Test nothing is produced after an error."""

        def produce() -> Iterator[bytes]:
            yield b"a"
            raise RuntimeError("broken source")

        seq = BlobSequence(produce())

        assert next(seq) == b"a"
        with pytest.raises(RuntimeError, match="broken source"):
            next(seq)
        assert seq.closed
        with pytest.raises(StopIteration):
            next(seq)
