"""Tag rules deciding whether a way describes an area.

Each key maps to one of three rule kinds:

- ``ALL``: any value (other than ``no``) marks an area.
- ``WHITELIST``: only the listed values mark an area.
- ``BLACKLIST``: any non-empty value except the listed ones marks an area.
"""
from typing import Dict, FrozenSet, Iterable, Tuple

ALL = 'all'
WHITELIST = 'whitelist'
BLACKLIST = 'blacklist'

AREA_RULES: Dict[str, Tuple[str, FrozenSet[str]]] = {
    'building': (ALL, frozenset()),
    'highway': (WHITELIST, frozenset({
        'services', 'rest_area', 'escape', 'elevator'
    })),
    'natural': (BLACKLIST, frozenset({
        'coastline', 'cliff', 'ridge', 'arete', 'tree_row'
    })),
    'landuse': (ALL, frozenset()),
    'waterway': (WHITELIST, frozenset({
        'riverbank', 'dock', 'boatyard', 'dam'
    })),
    'amenity': (ALL, frozenset()),
    'leisure': (ALL, frozenset()),
    'barrier': (WHITELIST, frozenset({
        'city_wall', 'ditch', 'hedge', 'retaining_wall', 'wall', 'spikes'
    })),
    'railway': (WHITELIST, frozenset({
        'station', 'turntable', 'roundhouse', 'platform'
    })),
    'area': (ALL, frozenset()),
    'boundary': (ALL, frozenset()),
    'man_made': (BLACKLIST, frozenset({
        'cutline', 'embankment', 'pipeline'
    })),
    'power': (WHITELIST, frozenset({
        'plant', 'substation', 'generator', 'transformer'
    })),
    'place': (ALL, frozenset()),
    'shop': (ALL, frozenset()),
    'aeroway': (BLACKLIST, frozenset({'taxiway'})),
    'tourism': (ALL, frozenset()),
    'historic': (ALL, frozenset()),
    'public_transport': (ALL, frozenset()),
    'office': (ALL, frozenset()),
    'building:part': (ALL, frozenset()),
    'military': (ALL, frozenset()),
    'ruins': (ALL, frozenset()),
    'area:highway': (ALL, frozenset()),
    'craft': (ALL, frozenset()),
    'golf': (ALL, frozenset()),
}


def tag_marks_area(key: str, value: str) -> bool:
    """Check a single key/value pair against the area rules.

    Args:
        key: Tag key
        value: Tag value

    Returns:
        True if this tag alone makes a way an area
    """
    rule = AREA_RULES.get(key)
    if rule is None or value == 'no':
        return False

    kind, values = rule
    if kind == ALL:
        return True
    if kind == WHITELIST:
        return value in values
    return value != '' and value not in values


def tags_mark_area(tags: Iterable) -> bool:
    """Check whether any tag in a sequence of Tag objects marks an area."""
    return any(tag_marks_area(tag.key, tag.value) for tag in tags)
