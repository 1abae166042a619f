"""Allow ``python -m playlie``."""

import sys

from playlie.cli import main

sys.exit(main())
