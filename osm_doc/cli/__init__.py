"""Command-line interface for OSMDoc.

Usage:
    # After pip install:
    osmdoc --help
    osmdoc summary map.osm
    osmdoc refs map.osm

    # Or via Python:
    python -m osm_doc.cli
"""

import sys
from osm_doc.cli.main import main as _main, create_parser

__all__ = ['main', 'create_parser']


def main() -> int:
    """Entry point for the osmdoc CLI.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        return _main() or 0
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
