"""Allow running as ``python -m wormhole``."""

import sys

from wormhole.cli import main

if __name__ == "__main__":
    sys.exit(main())
