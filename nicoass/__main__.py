"""Allow ``python -m nicoass``."""

import sys

from nicoass.cli import main

if __name__ == "__main__":
    sys.exit(main())
