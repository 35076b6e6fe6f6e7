"""CLI main entry point with subcommand structure."""
import argparse
import logging
import sys
from typing import Optional

from osm_doc import __version__
from osm_doc.errors import OSMParseError


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog='osmdoc',
        description='OSMDoc - typed OpenStreetMap XML documents',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  osmdoc summary map.osm
  osmdoc summary --json map.osm
  osmdoc refs map.osm
  osmdoc refs --limit 20 map.osm
'''
    )

    # Global options
    parser.add_argument('--version', '-V', action='version',
                        version=f'osmdoc {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Suppress non-error output')
    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='Increase verbosity (-v info, -vv debug)')

    # Subcommands
    subparsers = parser.add_subparsers(dest='command', title='commands',
                                       description='Available commands')

    from osm_doc.cli.commands.summary import setup_parser as setup_summary
    setup_summary(subparsers)

    from osm_doc.cli.commands.refs import setup_parser as setup_refs
    setup_refs(subparsers)

    return parser


def configure_logging(verbose: int, quiet: bool) -> None:
    """Route osm_doc log records to stderr according to -v/-q."""
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(name)s: %(levelname)s: %(message)s',
        stream=sys.stderr,
        force=True,
    )


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    # No command specified - show help
    if not parsed_args.command:
        parser.print_help()
        return 0

    configure_logging(parsed_args.verbose, parsed_args.quiet)

    try:
        if parsed_args.command == 'summary':
            from osm_doc.cli.commands.summary import run as cmd_summary
            return cmd_summary(parsed_args)
        elif parsed_args.command == 'refs':
            from osm_doc.cli.commands.refs import run as cmd_refs
            return cmd_refs(parsed_args)
        else:
            parser.print_help()
            return 0
    except FileNotFoundError as e:
        print(f"osmdoc: error: File not found: {e.filename or e}", file=sys.stderr)
        return 3
    except PermissionError as e:
        print(f"osmdoc: error: Permission denied: {e}", file=sys.stderr)
        return 4
    except OSMParseError as e:
        print(f"osmdoc: error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
