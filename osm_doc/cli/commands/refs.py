"""Refs command - list references that do not resolve."""
import json
import sys

from osm_doc.parsing.builder import parse_file


def setup_parser(subparsers):
    """Setup the refs subcommand parser."""
    parser = subparsers.add_parser(
        'refs',
        help='List dangling references',
        description='List way nodes and relation members whose targets '
                    'are not part of the file'
    )

    parser.add_argument('input', help='Input OSM file')
    parser.add_argument(
        '--limit', '-n',
        type=int,
        default=None,
        help='Show at most N references'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Output as JSON'
    )

    parser.set_defaults(func=run)
    return parser


def run(args) -> int:
    """Execute the refs command."""
    if args.limit is not None and args.limit < 0:
        print("osmdoc: error: --limit must not be negative", file=sys.stderr)
        return 2

    document = parse_file(args.input)
    dangling = document.dangling_references()
    shown = dangling if args.limit is None else dangling[:args.limit]

    if args.json:
        print(json.dumps({
            'total': len(dangling),
            'references': [
                {
                    'owner_type': ref.owner_type.value,
                    'owner_id': ref.owner_id,
                    'target_type': ref.target_type.value,
                    'target_id': ref.target_id,
                    'role': ref.role,
                }
                for ref in shown
            ]
        }, indent=2))
        return 0

    for ref in shown:
        line = (f"{ref.owner_type.value} {ref.owner_id} -> "
                f"{ref.target_type.value} {ref.target_id}")
        if ref.role:
            line += f" ({ref.role})"
        print(line)

    if not args.quiet:
        print(f"{len(dangling):,} dangling reference(s)")

    return 0
