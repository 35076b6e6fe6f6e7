#!/usr/bin/env python3
"""
OSMDoc - typed OpenStreetMap XML documents

This is the CLI entry point. The implementation is in the osm_doc package.

Usage:
    osmdoc summary map.osm
    osmdoc refs map.osm

For more information, run: osmdoc --help
"""
import sys

# Re-export public API
from osm_doc import (
    # Version
    __version__,
    # Models
    Document,
    Node,
    Way,
    Relation,
    Member,
    Tag,
    Bounds,
    ElementType,
    # Parsing
    parse,
    parse_file,
    # Errors
    OSMParseError,
)

from osm_doc.cli.main import main


def cli_main():
    """CLI entry point for setuptools."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
