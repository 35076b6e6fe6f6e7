"""Pull-based markup events over the SAX incremental parser.

The scanner reads the byte stream in chunks, feeds them to ``xml.sax`` and
hands out the buffered events one at a time. Character decoding is done by
expat according to the document's XML declaration.
"""
import xml.sax
import xml.sax.handler
from collections import deque
from typing import BinaryIO, Deque, Dict, Iterator, List, NamedTuple, Optional, Union

from osm_doc.errors import MalformedMarkupError, TruncatedDocumentError

DEFAULT_CHUNK_SIZE = 64 * 1024


class StartElement(NamedTuple):
    name: str
    attrs: Dict[str, str]
    line: Optional[int] = None
    column: Optional[int] = None


class EndElement(NamedTuple):
    name: str
    line: Optional[int] = None
    column: Optional[int] = None


class Text(NamedTuple):
    content: str


class EndOfStream(NamedTuple):
    pass


MarkupEvent = Union[StartElement, EndElement, Text, EndOfStream]


class _EventCollector(xml.sax.ContentHandler):
    """SAX handler that queues events instead of acting on them."""

    def __init__(self):
        super().__init__()
        self.events: Deque[MarkupEvent] = deque()
        self.open_elements: List[str] = []
        self.saw_root = False
        self._locator = None
        self._text: List[str] = []

    def setDocumentLocator(self, locator):
        self._locator = locator

    def position(self):
        if self._locator is None:
            return None, None
        return self._locator.getLineNumber(), self._locator.getColumnNumber()

    def _flush_text(self):
        if self._text:
            content = ''.join(self._text)
            self._text = []
            if content.strip():
                self.events.append(Text(content))

    def startElement(self, name, attrs):
        self._flush_text()
        self.saw_root = True
        self.open_elements.append(name)
        line, column = self.position()
        self.events.append(StartElement(name, dict(attrs), line, column))

    def endElement(self, name):
        self._flush_text()
        self.open_elements.pop()
        line, column = self.position()
        self.events.append(EndElement(name, line, column))

    def characters(self, content):
        self._text.append(content)


class MarkupScanner:
    """Lazy, single-use sequence of markup events read from a byte stream.

    Iterating yields StartElement, EndElement and Text events and finishes
    with exactly one EndOfStream.

    Raises (while iterating):
        MalformedMarkupError: The stream is not well-formed XML
        TruncatedDocumentError: The stream ends inside an open element
    """

    def __init__(self, stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE):
        """Initialize scanner.

        Args:
            stream: Readable binary file-like object
            chunk_size: Number of bytes read per feed
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.stream = stream
        self.chunk_size = chunk_size
        self._consumed = False

    def __iter__(self) -> Iterator[MarkupEvent]:
        if self._consumed:
            raise RuntimeError("MarkupScanner can only be iterated once")
        self._consumed = True
        return self._events()

    def _events(self) -> Iterator[MarkupEvent]:
        handler = _EventCollector()
        parser = xml.sax.make_parser()
        parser.setContentHandler(handler)
        # expat only installs a locator from parse(), not from feed()
        handler.setDocumentLocator(parser)
        parser.setFeature(xml.sax.handler.feature_namespaces, False)
        parser.setFeature(xml.sax.handler.feature_external_ges, False)

        while True:
            chunk = self.stream.read(self.chunk_size)
            if not chunk:
                break
            try:
                parser.feed(chunk)
            except xml.sax.SAXParseException as e:
                raise _malformed(e) from e
            while handler.events:
                yield handler.events.popleft()

        try:
            parser.close()
        except xml.sax.SAXParseException as e:
            if handler.open_elements:
                raise TruncatedDocumentError(
                    handler.open_elements, e.getLineNumber(), e.getColumnNumber()
                ) from e
            raise _malformed(e) from e

        if not handler.saw_root:
            raise MalformedMarkupError("document contains no root element")

        while handler.events:
            yield handler.events.popleft()
        yield EndOfStream()


def _malformed(error: xml.sax.SAXParseException) -> MalformedMarkupError:
    return MalformedMarkupError(
        error.getMessage(),
        line=error.getLineNumber(),
        column=error.getColumnNumber()
    )
