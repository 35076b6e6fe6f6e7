"""Per-kind identifier index over a parsed Document.

Identifiers are only unique within a kind, so nodes, ways and relations each
get their own ``id -> list position`` mapping.

Duplicate ids keep the first occurrence: the first element with a given id in
document order is the one every lookup resolves to. Later duplicates stay in
the document lists and are recorded in ``duplicates``.
"""
import logging
from typing import TYPE_CHECKING, Dict, Iterable, Optional, Set, Union

from osm_doc.models.elements import ElementType
from osm_doc.models.references import REFERENCE_TYPES, UNRESOLVED, Reference

if TYPE_CHECKING:
    from osm_doc.models.document import Document

logger = logging.getLogger(__name__)

KindLike = Union[ElementType, str]


def _as_kind(kind: KindLike) -> ElementType:
    if isinstance(kind, ElementType):
        return kind
    return ElementType.from_name(kind)


class ReferenceIndex:
    """Identifier to position lookup for one document."""

    def __init__(self, document: 'Document'):
        """Initialize an empty index bound to a document.

        Use ``ReferenceIndex.build`` to get a populated index.

        Args:
            document: Document whose lists the positions refer to
        """
        self.document = document
        self._positions: Dict[ElementType, Dict[int, int]] = {
            kind: {} for kind in ElementType
        }
        self.duplicates: Dict[ElementType, Set[int]] = {
            kind: set() for kind in ElementType
        }

    @classmethod
    def build(cls, document: 'Document') -> 'ReferenceIndex':
        """Index every node, way and relation of a document.

        Args:
            document: Completely parsed document

        Returns:
            Populated ReferenceIndex
        """
        index = cls(document)
        index._add_all(ElementType.NODE, document.nodes)
        index._add_all(ElementType.WAY, document.ways)
        index._add_all(ElementType.RELATION, document.relations)

        logger.debug(
            "Indexed %d nodes, %d ways, %d relations",
            len(index._positions[ElementType.NODE]),
            len(index._positions[ElementType.WAY]),
            len(index._positions[ElementType.RELATION])
        )
        return index

    def _add_all(self, kind: ElementType, elements: Iterable) -> None:
        positions = self._positions[kind]
        for position, element in enumerate(elements):
            if element.id in positions:
                self.duplicates[kind].add(element.id)
                continue
            positions[element.id] = position

        if self.duplicates[kind]:
            logger.debug("Duplicate %s ids, keeping first: %s",
                         kind.value, sorted(self.duplicates[kind]))

    def position(self, kind: KindLike, element_id: int) -> Optional[int]:
        """Get the list position of an element, or None if absent."""
        return self._positions[_as_kind(kind)].get(element_id)

    def resolve(self, kind: KindLike, element_id: int) -> Reference:
        """Resolve an identifier among the elements of one kind.

        Never raises for absent ids.

        Args:
            kind: ElementType or its name
            element_id: Identifier to look up

        Returns:
            NodeReference, WayReference or RelationReference on a hit,
            UNRESOLVED on a miss
        """
        kind = _as_kind(kind)
        position = self._positions[kind].get(element_id)
        if position is None:
            return UNRESOLVED
        return REFERENCE_TYPES[kind](self.document, position)

    def __contains__(self, key) -> bool:
        kind, element_id = key
        return element_id in self._positions[_as_kind(kind)]

    def __len__(self) -> int:
        return sum(len(p) for p in self._positions.values())
