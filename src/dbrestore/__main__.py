"""Allow ``python -m dbrestore``."""

import sys

from dbrestore.ui.cli import main

sys.exit(main())
