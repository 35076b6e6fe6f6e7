"""Parsed OSM document and its reference queries."""
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, NamedTuple, Optional, Tuple, Union

from osm_doc.models.elements import (
    Bounds, ElementType, Member, Node, Relation, Way
)
from osm_doc.models.references import Reference

if TYPE_CHECKING:
    from osm_doc.index.reference_index import ReferenceIndex


class DanglingReference(NamedTuple):
    """A way node or relation member whose target is not in the document."""
    owner_type: ElementType
    owner_id: int
    target_type: ElementType
    target_id: int
    role: Optional[str] = None


@dataclass
class Document:
    """Root aggregate produced by a parse.

    Lists keep document order. The reference index is built on first use and
    cached; call ``build_index()`` before sharing the document across threads.
    """
    bounds: Optional[Bounds] = None
    nodes: List[Node] = field(default_factory=list)
    ways: List[Way] = field(default_factory=list)
    relations: List[Relation] = field(default_factory=list)

    _index: Optional['ReferenceIndex'] = field(
        default=None, init=False, repr=False, compare=False
    )
    _index_lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    @property
    def index(self) -> 'ReferenceIndex':
        """Reference index over the current lists, built once."""
        if self._index is None:
            with self._index_lock:
                if self._index is None:
                    from osm_doc.index.reference_index import ReferenceIndex
                    self._index = ReferenceIndex.build(self)
        return self._index

    def build_index(self) -> 'ReferenceIndex':
        """Build the reference index now instead of on the first query."""
        return self.index

    @property
    def total_elements(self) -> int:
        """Get total number of elements."""
        return len(self.nodes) + len(self.ways) + len(self.relations)

    def resolve_reference(self, reference: Union[Member, int, ElementType, str],
                          element_id: Optional[int] = None) -> Reference:
        """Resolve a member, a way node id, or a (kind, id) pair, to an element.

        Examples:
            doc.resolve_reference(relation.members[0])
            doc.resolve_reference(way.nodes[0])
            doc.resolve_reference(ElementType.WAY, 10)
            doc.resolve_reference('node', 1)

        Returns:
            A resolved Reference, or UNRESOLVED when the id is absent
        """
        if isinstance(reference, Member):
            return self.index.resolve(reference.type, reference.ref)
        if isinstance(reference, int) and not isinstance(reference, bool):
            if element_id is not None:
                raise TypeError("resolve_reference() takes no id with a way node id")
            return self.resolve_way_node(reference)
        if element_id is None:
            raise TypeError("resolve_reference() needs an id when given a kind")
        return self.index.resolve(reference, element_id)

    def resolve_way_node(self, node_id: int) -> Reference:
        """Resolve one entry of a way's node list among the nodes."""
        return self.index.resolve(ElementType.NODE, node_id)

    def resolve_way_nodes(self, way: Way) -> List[Reference]:
        """Resolve every node reference of a way, in way order."""
        return [self.resolve_way_node(node_id) for node_id in way.nodes]

    def resolve_members(self, relation: Relation) -> List[Tuple[Member, Reference]]:
        """Resolve every member of a relation, in member order."""
        return [(member, self.resolve_reference(member))
                for member in relation.members]

    def dangling_references(self) -> List[DanglingReference]:
        """Collect way nodes and relation members that do not resolve."""
        dangling = []
        for way in self.ways:
            for node_id in way.nodes:
                if not self.resolve_way_node(node_id):
                    dangling.append(DanglingReference(
                        ElementType.WAY, way.id, ElementType.NODE, node_id
                    ))
        for relation in self.relations:
            for member in relation.members:
                if not self.resolve_reference(member):
                    dangling.append(DanglingReference(
                        ElementType.RELATION, relation.id,
                        member.type, member.ref, member.role
                    ))
        return dangling
