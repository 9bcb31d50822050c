"""Sanitize the first bytes of a file, writing well-formed UTF-8 to stdout.

Mirrors what ``utf8engine sanitize FILE --limit`` does, using the library
directly.

Usage:
    python examples/sanitize_file.py FILE [LIMIT]
"""

import sys
from pathlib import Path

from utf8engine import NotEnoughRoomError, replace_invalid
from utf8engine.cli import truncate_at_boundary
from utf8engine.constants import DEFAULT_SAMPLE_LIMIT


def main() -> int:
    if len(sys.argv) < 2:
        print(__doc__, file=sys.stderr)
        return 2
    limit = int(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_SAMPLE_LIMIT
    data = truncate_at_boundary(Path(sys.argv[1]).read_bytes(), limit)
    try:
        sys.stdout.buffer.write(replace_invalid(data))
    except NotEnoughRoomError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
