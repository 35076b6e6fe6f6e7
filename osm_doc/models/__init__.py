"""Data models for OSM elements, documents and references."""

from osm_doc.models.elements import (
    Bounds, ElementType, Member, Node, Relation, Tag, Way
)
from osm_doc.models.references import (
    UNRESOLVED, NodeReference, Reference, RelationReference, Unresolved,
    WayReference
)
from osm_doc.models.document import DanglingReference, Document

__all__ = [
    'Bounds', 'ElementType', 'Member', 'Node', 'Relation', 'Tag', 'Way',
    'Reference', 'Unresolved', 'UNRESOLVED', 'NodeReference', 'WayReference',
    'RelationReference', 'DanglingReference', 'Document',
]
