"""Entry point for running via: python3 -m statusline"""

import sys

from .app.cli import main

if __name__ == "__main__":
    sys.exit(main())
