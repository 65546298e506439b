"""Allow ``python -m jsonscan``."""

import sys

from jsonscan.cli import main

sys.exit(main())
