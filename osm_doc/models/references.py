"""Results of reference resolution.

A resolution query returns exactly one of four variants:

    Unresolved          the id is not present in the document
    NodeReference       points at an entry of ``document.nodes``
    WayReference        points at an entry of ``document.ways``
    RelationReference   points at an entry of ``document.relations``

Resolved variants do not copy the entity. They hold the owning document and a
list position, so ``ref.element`` is the very object stored in the document.
Mutating the document's lists after the index was built invalidates them.
"""
from typing import TYPE_CHECKING, Any, Optional

from osm_doc.models.elements import ElementType

if TYPE_CHECKING:
    from osm_doc.models.document import Document


class Reference:
    """Base of the closed set of resolution results."""

    __slots__ = ()

    kind: Optional[ElementType] = None

    @property
    def resolved(self) -> bool:
        return self.kind is not None

    def __bool__(self) -> bool:
        return self.resolved


class Unresolved(Reference):
    """The referenced element is not part of the document."""

    __slots__ = ()
    _instance: Optional['Unresolved'] = None

    def __new__(cls) -> 'Unresolved':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'Unresolved()'


UNRESOLVED = Unresolved()


class _Resolved(Reference):
    __slots__ = ('document', 'index')

    _list_name = ''

    def __init__(self, document: 'Document', index: int):
        object.__setattr__(self, 'document', document)
        object.__setattr__(self, 'index', index)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def element(self) -> Any:
        """The referenced entity, by identity."""
        return getattr(self.document, self._list_name)[self.index]

    @property
    def id(self) -> int:
        return self.element.id

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.document is other.document and self.index == other.index

    def __hash__(self) -> int:
        return hash((type(self), id(self.document), self.index))

    def __repr__(self) -> str:
        return f'{type(self).__name__}(index={self.index}, id={self.id})'


class NodeReference(_Resolved):
    __slots__ = ()
    kind = ElementType.NODE
    _list_name = 'nodes'


class WayReference(_Resolved):
    __slots__ = ()
    kind = ElementType.WAY
    _list_name = 'ways'


class RelationReference(_Resolved):
    __slots__ = ()
    kind = ElementType.RELATION
    _list_name = 'relations'


REFERENCE_TYPES = {
    ElementType.NODE: NodeReference,
    ElementType.WAY: WayReference,
    ElementType.RELATION: RelationReference,
}
