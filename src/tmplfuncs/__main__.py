"""Allow ``python -m tmplfuncs``."""

import sys

from tmplfuncs.cli import main

sys.exit(main())
