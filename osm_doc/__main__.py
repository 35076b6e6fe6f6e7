"""Allow running osm_doc as a module.

Usage:
    python -m osm_doc --help
    python -m osm_doc summary map.osm
    python -m osm_doc refs map.osm
"""

import sys
from osm_doc.cli import main

if __name__ == "__main__":
    sys.exit(main())
