"""Allow ``python -m mbsearch``."""

import sys

from mbsearch.ui.cli import main

sys.exit(main())
