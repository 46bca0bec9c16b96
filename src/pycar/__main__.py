"""Allow ``python -m pycar``."""

import sys

from pycar.cli import main

sys.exit(main())
