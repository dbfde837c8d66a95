"""Allow ``python -m bracemark``."""

import sys

from bracemark.cli import main

if __name__ == "__main__":
    sys.exit(main())
