"""Allow ``python -m p9walk``."""

import sys

from p9walk.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
