"""Streaming OSM XML parsing."""

from osm_doc.parsing.builder import DocumentBuilder, parse, parse_file
from osm_doc.parsing.scanner import (
    EndElement, EndOfStream, MarkupScanner, StartElement, Text
)

__all__ = [
    'DocumentBuilder', 'parse', 'parse_file',
    'MarkupScanner', 'StartElement', 'EndElement', 'Text', 'EndOfStream',
]
