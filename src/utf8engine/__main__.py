"""Entry point for ``python -m utf8engine``."""

import sys

from .cli import main

sys.exit(main())
