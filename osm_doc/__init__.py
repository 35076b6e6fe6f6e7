"""
OSM Doc - typed OpenStreetMap XML documents.

This package parses OSM XML into nodes, ways and relations and resolves
the id references between them.
"""
import logging

__version__ = "0.3.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Errors
from osm_doc.errors import (
    OSMParseError, MalformedMarkupError, MissingAttributeError,
    InvalidAttributeValueError, UnexpectedNestingError, TruncatedDocumentError
)

# Data models
from osm_doc.models.elements import (
    Tag, Bounds, Node, Way, Member, Relation, ElementType
)
from osm_doc.models.references import (
    Reference, Unresolved, UNRESOLVED, NodeReference, WayReference,
    RelationReference
)
from osm_doc.models.document import Document, DanglingReference

# Parsing
from osm_doc.parsing.scanner import MarkupScanner
from osm_doc.parsing.builder import DocumentBuilder, parse, parse_file

# Resolution
from osm_doc.index.reference_index import ReferenceIndex

__all__ = [
    # Version
    '__version__',
    # Errors
    'OSMParseError', 'MalformedMarkupError', 'MissingAttributeError',
    'InvalidAttributeValueError', 'UnexpectedNestingError',
    'TruncatedDocumentError',
    # Models
    'Tag', 'Bounds', 'Node', 'Way', 'Member', 'Relation', 'ElementType',
    'Document', 'DanglingReference',
    # References
    'Reference', 'Unresolved', 'UNRESOLVED', 'NodeReference', 'WayReference',
    'RelationReference',
    # Parsing
    'MarkupScanner', 'DocumentBuilder', 'parse', 'parse_file',
    # Resolution
    'ReferenceIndex',
]
