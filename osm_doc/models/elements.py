"""OSM Element data models."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from osm_doc.utils.area_rules import tags_mark_area


class ElementType(Enum):
    """Kind of an OSM element, as named by relation members."""
    NODE = 'node'
    WAY = 'way'
    RELATION = 'relation'

    @classmethod
    def from_name(cls, name: str) -> 'ElementType':
        """Look up a kind by its XML name.

        Raises:
            ValueError: If the name is not node, way or relation, in any case
        """
        return cls(name.lower())


@dataclass(frozen=True)
class Tag:
    """Free-form key/value annotation."""
    key: str
    value: str


@dataclass(frozen=True)
class Bounds:
    """Bounding box declared by the document."""
    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float

    @property
    def center(self) -> Tuple[float, float]:
        """Get the center point of the bounding box as (lat, lon)."""
        return (
            (self.min_lat + self.max_lat) / 2,
            (self.min_lon + self.max_lon) / 2
        )

    def contains(self, lat: float, lon: float) -> bool:
        """Check if a coordinate lies inside the box (edges included)."""
        return (self.min_lat <= lat <= self.max_lat and
                self.min_lon <= lon <= self.max_lon)


class _Tagged:
    """Tag accessors shared by nodes, ways and relations."""

    tags: List[Tag]

    def tag(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get the value of the first tag with the given key."""
        for tag in self.tags:
            if tag.key == key:
                return tag.value
        return default

    def tags_dict(self) -> Dict[str, str]:
        """Get tags as a dict. For duplicate keys the first value wins."""
        result: Dict[str, str] = {}
        for tag in self.tags:
            result.setdefault(tag.key, tag.value)
        return result


@dataclass
class Node(_Tagged):
    """OSM Node with location and tags."""
    id: int
    lat: float
    lon: float
    tags: List[Tag] = field(default_factory=list)


@dataclass
class Way(_Tagged):
    """OSM Way with node references and tags.

    ``nodes`` holds plain node identifiers. They may point at nodes that are
    not part of the document.
    """
    id: int
    tags: List[Tag] = field(default_factory=list)
    nodes: List[int] = field(default_factory=list)

    def is_polygon(self) -> bool:
        """Check if the node sequence is a closed ring.

        A ring needs at least two references with equal first and last ids.
        A single reference is not a ring.
        """
        return len(self.nodes) >= 2 and self.nodes[0] == self.nodes[-1]

    def is_area(self) -> bool:
        """Check if this way represents an area.

        True for closed rings and for ways carrying an area tag
        (building, landuse, ...) even when they are not closed.
        """
        return self.is_polygon() or tags_mark_area(self.tags)


@dataclass(frozen=True)
class Member:
    """Typed, role-annotated reference from a relation."""
    type: ElementType
    ref: int
    role: str = ''


@dataclass
class Relation(_Tagged):
    """OSM Relation with members and tags."""
    id: int
    tags: List[Tag] = field(default_factory=list)
    members: List[Member] = field(default_factory=list)

    @property
    def member_count(self) -> int:
        """Get the number of members in this relation."""
        return len(self.members)

    def get_members_by_type(self, member_type: ElementType) -> List[Member]:
        """Get all members of a specific type.

        Args:
            member_type: ElementType or its name ('node', 'way', 'relation')

        Returns:
            Members matching the type, in relation order
        """
        if not isinstance(member_type, ElementType):
            member_type = ElementType.from_name(member_type)
        return [m for m in self.members if m.type is member_type]

    def get_members_by_role(self, role: str) -> List[Member]:
        """Get all members with a specific role.

        Args:
            role: The role to filter by (e.g., 'outer', 'inner', 'stop')

        Returns:
            Members with the specified role, in relation order
        """
        return [m for m in self.members if m.role == role]
