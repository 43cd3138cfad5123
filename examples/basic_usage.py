"""Basic usage example for blobgzip.

This example demonstrates:
1. Writing records to a stream one member at a time
2. Reading them back lazily
3. Stopping early
4. Enforcing a strict per-blob ceiling
5. Inspecting a stream
"""

from __future__ import annotations

import io
import json

from blobgzip import (
    BlobSizeLimitExceeded,
    CodecConfig,
    decode_from_stream,
    encode_to_stream,
    summarize_stream,
)


def records():
    """Produce records lazily; the encoder never holds more than one."""
    for i in range(5):
        yield json.dumps({"seq": i, "body": "ping" * (i + 1)}).encode()


def main() -> None:
    """Run basic usage example."""
    print("=" * 60)
    print("blobgzip Basic Usage Example")
    print("=" * 60)

    # Encode
    stream = io.BytesIO()
    count = encode_to_stream(stream, records())
    print(f"\nWrote {count} members, {len(stream.getvalue())} bytes")

    # Decode lazily
    stream.seek(0)
    print("\nDecoded:")
    with decode_from_stream(stream) as blobs:
        for blob in blobs:
            print(f"  {json.loads(blob)}")

    # Early stop: the rest of the stream is never decoded
    stream.seek(0)
    with decode_from_stream(stream) as blobs:
        first = next(blobs)
    print(f"\nFirst blob only: {first!r}")

    # Strict ceiling
    stream.seek(0)
    print("\nStrict 32-byte ceiling:")
    config = CodecConfig(max_blob_size=32, on_oversize="raise")
    try:
        for blob in decode_from_stream(stream, config=config):
            print(f"  {len(blob)} bytes ok")
    except BlobSizeLimitExceeded as e:
        print(f"  stopped: {e}")

    # Inspect
    stream.seek(0)
    summary = summarize_stream(stream)
    print(f"\n{summary.count} members, {summary.blob_size} blob bytes, ratio {summary.ratio:.2f}x")


if __name__ == "__main__":
    main()
