"""Parse errors raised while building a Document.

Every error aborts the whole parse. Unresolved references are not errors:
they are returned as ``Unresolved`` from the resolution queries.
"""
from typing import Optional, Sequence


class OSMParseError(Exception):
    """Base class for all failures of a single parse call."""

    def __init__(self, message: str, element: Optional[str] = None,
                 line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.element = element
        self.line = line
        self.column = column
        super().__init__(self._format())

    def _format(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line}, column {self.column})"


class MalformedMarkupError(OSMParseError):
    """The byte stream is not well-formed XML."""


class MissingAttributeError(OSMParseError):
    """An element lacks an attribute its kind requires."""

    def __init__(self, element: str, attribute: str,
                 line: Optional[int] = None, column: Optional[int] = None):
        self.attribute = attribute
        super().__init__(
            f"<{element}> is missing required attribute '{attribute}'",
            element=element, line=line, column=column
        )


class InvalidAttributeValueError(OSMParseError):
    """An attribute is present but cannot be parsed as its required type."""

    def __init__(self, element: str, attribute: str, value: str,
                 expected: str, line: Optional[int] = None,
                 column: Optional[int] = None):
        self.attribute = attribute
        self.value = value
        self.expected = expected
        super().__init__(
            f"<{element}> attribute '{attribute}' has invalid value "
            f"{value!r} (expected {expected})",
            element=element, line=line, column=column
        )


class UnexpectedNestingError(OSMParseError):
    """A known element appears somewhere the grammar does not allow it."""

    def __init__(self, element: str, parent: Optional[str],
                 line: Optional[int] = None, column: Optional[int] = None,
                 message: Optional[str] = None):
        self.parent = parent
        where = f"inside <{parent}>" if parent else "at document level"
        super().__init__(
            message or f"<{element}> is not allowed {where}",
            element=element, line=line, column=column
        )


class TruncatedDocumentError(OSMParseError):
    """The stream ended while elements were still open."""

    def __init__(self, open_elements: Sequence[str],
                 line: Optional[int] = None, column: Optional[int] = None):
        self.open_elements = list(open_elements)
        if self.open_elements:
            detail = f"unclosed: {', '.join(f'<{e}>' for e in self.open_elements)}"
        else:
            detail = "no closing tag"
        super().__init__(
            f"document ended unexpectedly ({detail})",
            element=self.open_elements[-1] if self.open_elements else None,
            line=line, column=column
        )
