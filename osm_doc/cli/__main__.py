"""Allow running osm_doc.cli as a module.

Usage:
    python -m osm_doc.cli --help
    python -m osm_doc.cli summary map.osm
"""

import sys
from osm_doc.cli import main

if __name__ == "__main__":
    sys.exit(main())
