"""
Module execution entry point.

Allows running with: python -m merkleforge_cli
"""

import sys
from merkleforge_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
