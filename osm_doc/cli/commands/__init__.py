"""CLI command implementations."""

from osm_doc.cli.commands.summary import run as cmd_summary
from osm_doc.cli.commands.refs import run as cmd_refs

__all__ = ['cmd_summary', 'cmd_refs']
