"""Stream analysis CLI command."""

from __future__ import annotations

from pathlib import Path

from ..config import CodecConfig
from ..utils.members import StreamSummary, summarize_stream


def analyze_file(file_path: Path, config: CodecConfig | None = None) -> StreamSummary:
    """Print a per-member breakdown of a blob stream file.

    Args:
        file_path: Path to a stream of concatenated gzip members
        config: Codec configuration used while scanning

    Returns:
        The stream summary that was printed
    """
    with file_path.open("rb") as f:
        summary = summarize_stream(f, config=config)

    # Header
    print("|" * 7, "blobgzip: gzip member stream", "|" * 7)
    print(f"{summary.count} member{'s' if summary.count != 1 else ''} in {file_path}.")
    print("Sizes are in bytes.")
    print()

    if summary.members:
        print(f"{'#':>6} {'offset':>12} {'stream':>10} {'blob':>10}  crc32")
        for stats in summary.members:
            flag = "  (truncated)" if stats.truncated else ""
            print(
                f"{stats.index:>6} {stats.offset:>12} {stats.compressed_size:>10} "
                f"{stats.blob_size:>10}  {stats.crc32:08x}{flag}"
            )
        print()

    # Summary section
    print(f"{'=' * 24} Summary {'=' * 24}")
    print(f"Stream size: {summary.compressed_size} bytes")
    print(f"Blob bytes:  {summary.blob_size} bytes")
    print(f"Expansion:   {summary.ratio:.2f}x")
    print()

    return summary
