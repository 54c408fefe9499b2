"""Allow ``python -m chordsheet``."""

import sys

from chordsheet.cli import main

sys.exit(main())
