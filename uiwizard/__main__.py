"""Allow ``python -m uiwizard``."""

import sys

from uiwizard.cli import main

sys.exit(main())
