"""Build a Document from a stream of markup events.

Grammar accepted inside the document element::

    bounds                 at most once
    node      > tag*
    way       > (nd | tag)*
    relation  > (member | tag)*

Element names and member types are matched case-insensitively. Elements
with any other name are skipped together with their subtree.
Known elements in the wrong place, missing or malformed attributes and
truncated input abort the parse.
"""
import logging
import math
import os
import re
from typing import BinaryIO, Dict, FrozenSet, Iterable, List, Union

from osm_doc.errors import (
    InvalidAttributeValueError, MalformedMarkupError, MissingAttributeError,
    TruncatedDocumentError, UnexpectedNestingError
)
from osm_doc.models.document import Document
from osm_doc.models.elements import (
    Bounds, ElementType, Member, Node, Relation, Tag, Way
)
from osm_doc.parsing.scanner import (
    DEFAULT_CHUNK_SIZE, EndElement, EndOfStream, MarkupEvent, MarkupScanner,
    StartElement
)

logger = logging.getLogger(__name__)

ROOT = '#document'

ALLOWED_CHILDREN: Dict[str, FrozenSet[str]] = {
    ROOT: frozenset({'bounds', 'node', 'way', 'relation'}),
    'node': frozenset({'tag'}),
    'way': frozenset({'nd', 'tag'}),
    'relation': frozenset({'member', 'tag'}),
    'bounds': frozenset(),
    'tag': frozenset(),
    'nd': frozenset(),
    'member': frozenset(),
}

KNOWN_ELEMENTS = frozenset(ALLOWED_CHILDREN) - {ROOT}

_INT_PATTERN = re.compile(r'[+-]?0*[0-9]{1,19}\Z')
_FLOAT_PATTERN = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\Z')

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


class _Frame:
    """An open element on the builder stack."""

    __slots__ = ('name', 'element')

    def __init__(self, name: str, element=None):
        self.name = name
        self.element = element


class DocumentBuilder:
    """Consumes markup events and assembles a Document.

    A builder holds the state of one parse only; ``build`` may be called
    again for another event sequence.
    """

    def __init__(self):
        self._reset()

    def _reset(self) -> None:
        self.document = Document()
        self._stack: List[_Frame] = []
        self._skipped: List[str] = []
        self._root_seen = False
        self._skipped_count = 0

    def build(self, events: Iterable[MarkupEvent]) -> Document:
        """Build a document from markup events.

        Args:
            events: Event sequence ending with EndOfStream

        Returns:
            Fully populated Document

        Raises:
            OSMParseError: Any structural or attribute failure
        """
        self._reset()

        for event in events:
            if isinstance(event, StartElement):
                self._start(event)
            elif isinstance(event, EndElement):
                self._end(event)
            elif isinstance(event, EndOfStream):
                return self._finish()

        # Event source dried up without announcing the end
        raise TruncatedDocumentError(self._open_names())

    def _open_names(self) -> List[str]:
        return [frame.name for frame in self._stack] + self._skipped

    def _start(self, event: StartElement) -> None:
        name = event.name.lower()

        if self._skipped:
            self._skipped.append(name)
            return

        if not self._stack:
            if self._root_seen:
                raise MalformedMarkupError(
                    "more than one document element", element=name,
                    line=event.line, column=event.column
                )
            if name in KNOWN_ELEMENTS:
                raise UnexpectedNestingError(name, None, event.line, event.column)
            self._root_seen = True
            self._stack.append(_Frame(name))
            return

        parent = self._stack[-1]
        if name not in KNOWN_ELEMENTS:
            logger.debug("Skipping unknown element <%s> in <%s>", name, parent.name)
            self._skipped_count += 1
            self._skipped.append(name)
            return

        parent_kind = ROOT if len(self._stack) == 1 else parent.name
        if name not in ALLOWED_CHILDREN[parent_kind]:
            raise UnexpectedNestingError(
                name, None if parent_kind == ROOT else parent.name,
                event.line, event.column
            )

        handler = getattr(self, f'_start_{name}')
        self._stack.append(_Frame(name, handler(event, parent)))

    def _end(self, event: EndElement) -> None:
        if self._skipped:
            self._skipped.pop()
            return

        if not self._stack:
            raise MalformedMarkupError(
                f"unexpected closing tag </{event.name}>", element=event.name,
                line=event.line, column=event.column
            )

        frame = self._stack.pop()
        if frame.name != event.name.lower():
            raise MalformedMarkupError(
                f"closing tag </{event.name}> does not match <{frame.name}>",
                element=event.name, line=event.line, column=event.column
            )

        if frame.name == 'node':
            self.document.nodes.append(frame.element)
        elif frame.name == 'way':
            self.document.ways.append(frame.element)
        elif frame.name == 'relation':
            self.document.relations.append(frame.element)

    def _finish(self) -> Document:
        if self._stack or self._skipped:
            raise TruncatedDocumentError(self._open_names())
        if not self._root_seen:
            raise MalformedMarkupError("document contains no root element")

        document = self.document
        logger.debug(
            "Parsed %d nodes, %d ways, %d relations (%d unknown elements skipped)",
            len(document.nodes), len(document.ways), len(document.relations),
            self._skipped_count
        )
        return document

    # Element handlers. Each returns the object kept on the stack frame.

    def _start_bounds(self, event: StartElement, parent: _Frame) -> Bounds:
        if self.document.bounds is not None:
            raise UnexpectedNestingError(
                'bounds', None, event.line, event.column,
                message='document declares <bounds> more than once'
            )
        self.document.bounds = Bounds(
            min_lat=_float_attr(event, 'minlat'),
            min_lon=_float_attr(event, 'minlon'),
            max_lat=_float_attr(event, 'maxlat'),
            max_lon=_float_attr(event, 'maxlon'),
        )
        return self.document.bounds

    def _start_node(self, event: StartElement, parent: _Frame) -> Node:
        return Node(
            id=_int_attr(event, 'id'),
            lat=_float_attr(event, 'lat'),
            lon=_float_attr(event, 'lon'),
        )

    def _start_way(self, event: StartElement, parent: _Frame) -> Way:
        return Way(id=_int_attr(event, 'id'))

    def _start_relation(self, event: StartElement, parent: _Frame) -> Relation:
        return Relation(id=_int_attr(event, 'id'))

    def _start_tag(self, event: StartElement, parent: _Frame) -> Tag:
        tag = Tag(_required_attr(event, 'k'), _required_attr(event, 'v'))
        parent.element.tags.append(tag)
        return tag

    def _start_nd(self, event: StartElement, parent: _Frame) -> int:
        ref = _int_attr(event, 'ref')
        parent.element.nodes.append(ref)
        return ref

    def _start_member(self, event: StartElement, parent: _Frame) -> Member:
        type_name = _required_attr(event, 'type')
        try:
            member_type = ElementType.from_name(type_name)
        except ValueError:
            raise InvalidAttributeValueError(
                event.name, 'type', type_name, 'node, way or relation',
                event.line, event.column
            ) from None
        member = Member(
            type=member_type,
            ref=_int_attr(event, 'ref'),
            role=_required_attr(event, 'role'),
        )
        parent.element.members.append(member)
        return member


def _required_attr(event: StartElement, attribute: str) -> str:
    value = event.attrs.get(attribute)
    if value is None:
        raise MissingAttributeError(event.name, attribute, event.line, event.column)
    return value


def _int_attr(event: StartElement, attribute: str) -> int:
    raw = _required_attr(event, attribute)
    value = raw.strip()
    if _INT_PATTERN.match(value):
        number = int(value)
        if INT64_MIN <= number <= INT64_MAX:
            return number
    raise InvalidAttributeValueError(
        event.name, attribute, raw, '64-bit integer', event.line, event.column
    )


def _float_attr(event: StartElement, attribute: str) -> float:
    raw = _required_attr(event, attribute)
    value = raw.strip()
    if _FLOAT_PATTERN.match(value):
        number = float(value)
        # Exponent overflow such as 1e999 parses as inf
        if math.isfinite(number):
            return number
    raise InvalidAttributeValueError(
        event.name, attribute, raw, 'finite number', event.line, event.column
    )


def parse(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Document:
    """Parse an OSM XML byte stream into a Document.

    Args:
        stream: Readable binary file-like object
        chunk_size: Number of bytes read from the stream at a time

    Returns:
        Parsed Document

    Raises:
        OSMParseError: On malformed markup, missing or invalid attributes,
            misplaced elements or truncated input
    """
    return DocumentBuilder().build(MarkupScanner(stream, chunk_size=chunk_size))


def parse_file(file_path: Union[str, os.PathLike],
               chunk_size: int = DEFAULT_CHUNK_SIZE) -> Document:
    """Open an OSM XML file in binary mode and parse it."""
    with open(file_path, 'rb') as f:
        return parse(f, chunk_size=chunk_size)
