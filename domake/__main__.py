"""CLI entry point for domake.

Usage:
    python -m domake [options]

Example:
    python -m domake
    python -m domake --yes
    python -m domake --dry-run --verbose
"""

from .runner import main
import sys

if __name__ == '__main__':
    sys.exit(main())
