"""Summary command - element counts, bounds and duplicate ids."""
import json
import logging
import time
from typing import Any, Dict

from osm_doc.models.document import Document
from osm_doc.models.elements import ElementType
from osm_doc.parsing.builder import parse_file

logger = logging.getLogger(__name__)


def setup_parser(subparsers):
    """Setup the summary subcommand parser."""
    parser = subparsers.add_parser(
        'summary',
        help='Show element counts and bounds',
        description='Parse an OSM XML file and summarize its contents'
    )

    parser.add_argument('input', help='Input OSM file')
    parser.add_argument(
        '--json',
        action='store_true',
        help='Output as JSON'
    )

    parser.set_defaults(func=run)
    return parser


def summarize(document: Document) -> Dict[str, Any]:
    """Collect summary figures for a parsed document.

    Args:
        document: Parsed document

    Returns:
        Dict with element counts, bounds, polygon/area way counts
        and duplicate ids per kind
    """
    index = document.build_index()
    bounds = document.bounds

    return {
        'elements': {
            'nodes': len(document.nodes),
            'ways': len(document.ways),
            'relations': len(document.relations),
            'total': document.total_elements,
        },
        'bounds': None if bounds is None else {
            'min_lat': bounds.min_lat,
            'min_lon': bounds.min_lon,
            'max_lat': bounds.max_lat,
            'max_lon': bounds.max_lon,
        },
        'ways': {
            'closed': sum(1 for way in document.ways if way.is_polygon()),
            'areas': sum(1 for way in document.ways if way.is_area()),
        },
        'dangling_references': len(document.dangling_references()),
        'duplicate_ids': {
            kind.value: sorted(index.duplicates[kind]) for kind in ElementType
        },
    }


def run(args) -> int:
    """Execute the summary command."""
    start_time = time.time()
    document = parse_file(args.input)
    logger.info("Parsed %s in %.3fs", args.input, time.time() - start_time)

    summary = summarize(document)

    if args.json:
        print(json.dumps(summary, indent=2))
        return 0

    if args.quiet:
        return 0

    counts = summary['elements']
    print(f"{args.input}: {counts['nodes']:,} nodes, {counts['ways']:,} ways, "
          f"{counts['relations']:,} relations ({counts['total']:,} total)")

    bounds = summary['bounds']
    if bounds:
        print(f"Bounds: {bounds['min_lat']}, {bounds['min_lon']} -> "
              f"{bounds['max_lat']}, {bounds['max_lon']}")
    else:
        print("Bounds: not declared")

    print(f"Closed ways: {summary['ways']['closed']:,} "
          f"(areas: {summary['ways']['areas']:,})")
    print(f"Dangling references: {summary['dangling_references']:,}")

    for kind, ids in summary['duplicate_ids'].items():
        if ids:
            print(f"Duplicate {kind} ids (first occurrence wins): "
                  f"{', '.join(str(i) for i in ids)}")

    return 0
