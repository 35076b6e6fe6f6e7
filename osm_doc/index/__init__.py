"""Reference resolution over parsed documents."""

from osm_doc.index.reference_index import ReferenceIndex

__all__ = ['ReferenceIndex']
