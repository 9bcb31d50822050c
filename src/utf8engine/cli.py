"""Command-line driver for utf8engine.

Usage:
    utf8engine sanitize FILE [-o OUT] [--replacement HEX] [--limit [N]]
    utf8engine validate FILE [--format {rust,simple,json}]
    utf8engine count FILE
    utf8engine version

Exit Codes:
    0   Success (for validate: the file is well-formed UTF-8)
    1   Invalid input (malformed or truncated UTF-8)
    2   Usage or file read/write error

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from utf8engine import __version__
from utf8engine.checked import (
    SanitizeConfig,
    distance,
    first_error,
    replace_invalid,
)
from utf8engine.constants import DEFAULT_SAMPLE_LIMIT, MAX_INPUT_SIZE
from utf8engine.core.classify import is_trail
from utf8engine.diagnostics import (
    DiagnosticFormatter,
    ErrorTemplate,
    InputTooLargeError,
    OutputFormat,
    Utf8EngineError,
)

__all__ = ["main", "truncate_at_boundary"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def truncate_at_boundary(data: bytes, limit: int) -> bytes:
    """Cut data to at most limit bytes without splitting a sequence.

    Backs up over continuation bytes so the cut lands on a lead byte.

    Example:
        >>> truncate_at_boundary("aé".encode(), 2)
        b'a'
    """
    if limit >= len(data):
        return data
    cut = limit
    while cut > 0 and is_trail(data[cut]):
        cut -= 1
    return data[:cut]


def _hex_code_point(text: str) -> int:
    try:
        return int(text.removeprefix("U+").removeprefix("u+"), 16)
    except ValueError:
        msg = f"not a hexadecimal code point: {text!r}"
        raise argparse.ArgumentTypeError(msg) from None


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        value = 0
    if value <= 0:
        msg = f"expected a positive integer, got {text!r}"
        raise argparse.ArgumentTypeError(msg)
    return value


def _read_input(path: Path) -> bytes | None:
    """Read path, enforcing MAX_INPUT_SIZE. Returns None after reporting."""
    try:
        data = path.read_bytes()
    except OSError as e:
        print(f"[ERROR] Cannot read file: {e}", file=sys.stderr)
        return None
    if len(data) > MAX_INPUT_SIZE:
        error = InputTooLargeError(ErrorTemplate.input_too_large(len(data), MAX_INPUT_SIZE))
        print(f"[ERROR] {error}", file=sys.stderr)
        return None
    logger.debug("Read %d bytes from %s", len(data), path)
    return data


def _cmd_sanitize(args: argparse.Namespace) -> int:
    data = _read_input(args.file)
    if data is None:
        return EXIT_USAGE
    if args.limit is not None:
        data = truncate_at_boundary(data, args.limit)

    try:
        config = SanitizeConfig(replacement=args.replacement, max_input_size=MAX_INPUT_SIZE)
        result = replace_invalid(data, config=config)
    except Utf8EngineError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_INVALID if e.position is not None else EXIT_USAGE

    if args.output is None:
        sys.stdout.buffer.write(result)
        sys.stdout.buffer.flush()
        return EXIT_OK
    try:
        args.output.write_bytes(result)
    except OSError as e:
        print(f"[ERROR] Cannot write file: {e}", file=sys.stderr)
        return EXIT_USAGE
    return EXIT_OK


def _cmd_validate(args: argparse.Namespace) -> int:
    data = _read_input(args.file)
    if data is None:
        return EXIT_USAGE
    error = first_error(data)
    if error is None:
        print("valid")
        return EXIT_OK
    formatter = DiagnosticFormatter(output_format=args.format)
    print(f"invalid at offset {error.position}")
    print(formatter.format(error.diagnostic))
    return EXIT_INVALID


def _cmd_count(args: argparse.Namespace) -> int:
    data = _read_input(args.file)
    if data is None:
        return EXIT_USAGE
    try:
        print(distance(data))
    except Utf8EngineError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_INVALID
    return EXIT_OK


def _cmd_version(_args: argparse.Namespace) -> int:
    print(__version__)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="utf8engine",
        description="Validate, sanitize and measure UTF-8 files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Replace malformed sequences with U+FFFD:
  utf8engine sanitize broken.txt -o fixed.txt

  # Sanitize only the first 2000 bytes, using '?' as the marker:
  utf8engine sanitize broken.txt --limit --replacement 3F

  # Report the first malformed sequence as JSON:
  utf8engine validate broken.txt --format json
""",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    sanitize = commands.add_parser("sanitize", help="Replace malformed UTF-8 sequences")
    sanitize.add_argument("file", type=Path, help="Input file")
    sanitize.add_argument(
        "-o", "--output", type=Path, default=None, help="Output file (default: stdout)"
    )
    sanitize.add_argument(
        "--replacement",
        type=_hex_code_point,
        default=0xFFFD,
        help="Replacement code point in hex (default: FFFD)",
    )
    sanitize.add_argument(
        "--limit",
        type=_positive_int,
        nargs="?",
        const=DEFAULT_SAMPLE_LIMIT,
        default=None,
        help=f"Process only the first N bytes (default N: {DEFAULT_SAMPLE_LIMIT})",
    )
    sanitize.set_defaults(handler=_cmd_sanitize)

    validate = commands.add_parser("validate", help="Check a file is well-formed UTF-8")
    validate.add_argument("file", type=Path, help="Input file")
    validate.add_argument(
        "--format",
        type=OutputFormat,
        choices=list(OutputFormat),
        default=OutputFormat.RUST,
        help="Diagnostic output format (default: rust)",
    )
    validate.set_defaults(handler=_cmd_validate)

    count = commands.add_parser("count", help="Count the code points in a file")
    count.add_argument("file", type=Path, help="Input file")
    count.set_defaults(handler=_cmd_count)

    version = commands.add_parser("version", help="Print the package version")
    version.set_defaults(handler=_cmd_version)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return EXIT_OK if e.code == 0 else EXIT_USAGE

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    handler = args.handler
    return int(handler(args))


if __name__ == "__main__":
    sys.exit(main())
