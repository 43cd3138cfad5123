"""Main CLI entry point for blobgzip."""

from __future__ import annotations

import argparse
import logging
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import BinaryIO

from .. import __version__
from ..cli.analyze import analyze_file
from ..codec import decode_from_stream, encode_to_stream
from ..config import BLOB_SIZE_MAX_DEFAULT, COMPRESS_LEVEL_DEFAULT, CodecConfig
from ..exceptions import BlobGzipError

logger = logging.getLogger("blobgzip")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the blobgzip CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="blobgzip",
        description="blobgzip: one gzip member per blob",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  blobgzip --analyze blobs.gz                 Show members of a stream
  blobgzip --reframe in.gz out.gz --level 9   Re-compress member by member
  cat in.gz | blobgzip --reframe - - > out.gz
  blobgzip --version                          Show version
        """,
    )

    parser.add_argument(
        "--analyze",
        metavar="FILE",
        type=str,
        help="Show per-member sizes and checksums of a stream",
    )

    parser.add_argument(
        "--reframe",
        nargs=2,
        metavar=("IN", "OUT"),
        help="Decode IN and re-encode every blob to OUT ('-' for stdin/stdout)",
    )

    parser.add_argument(
        "--level",
        type=int,
        default=COMPRESS_LEVEL_DEFAULT,
        help=f"Compression level for --reframe (0-9, default {COMPRESS_LEVEL_DEFAULT})",
    )

    parser.add_argument(
        "--max-blob-size",
        type=int,
        default=BLOB_SIZE_MAX_DEFAULT,
        help=f"Per-blob byte ceiling while decoding (default {BLOB_SIZE_MAX_DEFAULT})",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on blobs larger than --max-blob-size instead of truncating them",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log member boundaries",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"blobgzip {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.analyze and not args.reframe:
        # If no command specified, show help
        parser.print_help()
        return 0

    try:
        config = CodecConfig(
            max_blob_size=args.max_blob_size,
            compress_level=args.level,
            on_oversize="raise" if args.strict else "truncate",
        )
    except ValueError as e:
        print(f"Error: invalid option: {e}", file=sys.stderr)
        return 1

    if args.analyze:
        file_path = Path(args.analyze)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            analyze_file(file_path, config)
            return 0
        except (BlobGzipError, OSError) as e:
            logger.error("Analyze failed: %s", e)
            print(f"Error analyzing file: {e}", file=sys.stderr)
            return 1

    try:
        count = reframe(args.reframe[0], args.reframe[1], config)
    except (BlobGzipError, OSError) as e:
        logger.error("Reframe failed: %s", e)
        print(f"Error reframing stream: {e}", file=sys.stderr)
        return 1

    print(f"{count} member{'s' if count != 1 else ''} written", file=sys.stderr)
    return 0


def reframe(src: str, dst: str, config: CodecConfig) -> int:
    """Decode ``src`` and re-encode every blob to ``dst`` without buffering the stream.

    Args:
        src: Input path, or "-" for stdin
        dst: Output path, or "-" for stdout
        config: Codec configuration for both directions

    Returns:
        Number of members written
    """
    with ExitStack() as stack:
        source: BinaryIO = (
            sys.stdin.buffer if src == "-" else stack.enter_context(open(src, "rb"))
        )
        sink: BinaryIO = (
            sys.stdout.buffer if dst == "-" else stack.enter_context(open(dst, "wb"))
        )
        blobs = stack.enter_context(decode_from_stream(source, config=config))
        count = encode_to_stream(sink, blobs, config=config)
        sink.flush()
        return count


if __name__ == "__main__":
    sys.exit(main())
