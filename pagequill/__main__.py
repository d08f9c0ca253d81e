"""
Entry point for running PageQuill as a module.

Usage:
    python -m pagequill render input.txt --output output.pdf
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
