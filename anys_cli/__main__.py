"""
Module execution entry point.

Allows running with: python -m anys_cli
"""

import sys
from anys_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
