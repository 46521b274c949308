"""Scanning pass that turns HTML text into a stream of tokens.

The tokenizer is an explicit state machine::

    INITIAL -> SCANNING_TEXT -> SCANNING_TAG_OPEN -> SCANNING_ATTRIBUTES
            -> (SCANNING_TEXT | SCANNING_COMMENT) -> ... -> DONE

``FAILED`` is entered right before a ``MalformedTagError`` is raised. Anything
else that looks odd (a lone ``<`` in text, a ``</>``) is treated the way a
browser would and never fails.
"""

import html
import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from ..elements import ESCAPABLE_RAW_TEXT_ELEMENTS, RAW_TEXT_ELEMENTS, canonical_tag_name
from ..errors import MalformedTagError

logger = logging.getLogger(__name__)

_TAG_NAME_RE = re.compile(r"[^\s/>]+")
_ATTR_NAME_RE = re.compile(r"[^\s/>][^\s/>=]*")
_UNQUOTED_VALUE_RE = re.compile(r"[^\s>]*")
_WHITESPACE_RE = re.compile(r"\s*")


class State(Enum):
    """Tokenizer states."""

    INITIAL = "initial"
    SCANNING_TEXT = "scanning_text"
    SCANNING_TAG_OPEN = "scanning_tag_open"
    SCANNING_ATTRIBUTES = "scanning_attributes"
    SCANNING_COMMENT = "scanning_comment"
    DONE = "done"
    FAILED = "failed"


@dataclass
class StartTag:
    name: str
    attributes: list[tuple[str, str | None]] = field(default_factory=list)
    self_closing: bool = False
    offset: int = 0


@dataclass
class EndTag:
    name: str
    offset: int = 0


@dataclass
class Characters:
    data: str
    offset: int = 0


@dataclass
class CommentToken:
    data: str
    offset: int = 0


Token = StartTag | EndTag | Characters | CommentToken


def _add_attribute(attributes: list[tuple[str, str | None]], name: str, value: str | None) -> None:
    # First occurrence keeps its position, the last value wins
    lowered = name.lower()
    for index, (existing, _) in enumerate(attributes):
        if existing.lower() == lowered:
            attributes[index] = (existing, value)
            return
    attributes.append((name, value))


class Tokenizer:
    """Single-use tokenizer over one HTML source string."""

    def __init__(self, source: str):
        self.source = source
        self.length = len(source)
        self.pos = 0
        self.state = State.INITIAL
        self._raw_text_tag: str | None = None

    def __iter__(self) -> Iterator[Token]:
        return self.tokens()

    def location(self, offset: int) -> tuple[int, int]:
        """Return the 1-based (line, column) of ``offset``."""
        line = self.source.count("\n", 0, offset) + 1
        column = offset - self.source.rfind("\n", 0, offset)
        return line, column

    def _fail(self, message: str, offset: int) -> MalformedTagError:
        self.state = State.FAILED
        line, column = self.location(offset)
        return MalformedTagError(message, offset, line, column)

    def tokens(self) -> Iterator[Token]:
        """Yield tokens until the end of input.

        Raises:
            MalformedTagError: On an unterminated tag, attribute value or comment
        """
        if self.state is not State.INITIAL:
            raise RuntimeError("Tokenizer instances can only be consumed once")

        self.state = State.SCANNING_TEXT
        while self.state is not State.DONE:
            if self.state is State.SCANNING_TEXT:
                token = self._scan_text()
            elif self.state is State.SCANNING_COMMENT:
                token = self._scan_comment()
            elif self.state is State.SCANNING_TAG_OPEN:
                token = self._scan_tag_open()
            else:
                raise RuntimeError(f"Unexpected tokenizer state: {self.state}")

            if token is not None:
                yield token

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def _find_markup_start(self, start: int) -> int:
        """Return the offset of the next ``<`` that opens markup, or ``length``."""
        source = self.source
        index = source.find("<", start)
        while index != -1:
            following = source[index + 1:index + 2]
            if following.isalpha() or following in ("!", "?"):
                return index
            if following == "/" and source[index + 2:index + 3].isalpha():
                return index
            if following == "/" and source[index + 2:index + 3] == ">":
                # "</>" is dropped entirely by browsers
                return index
            index = source.find("<", index + 1)
        return self.length

    def _scan_text(self) -> Token | None:
        if self.pos >= self.length:
            self.state = State.DONE
            return None

        if self._raw_text_tag is not None:
            return self._scan_raw_text(self._raw_text_tag)

        start = self.pos
        markup = self._find_markup_start(start)
        self.pos = markup

        if markup < self.length:
            if self.source.startswith("<!--", markup):
                self.state = State.SCANNING_COMMENT
            else:
                self.state = State.SCANNING_TAG_OPEN

        if markup > start:
            return Characters(html.unescape(self.source[start:markup]), start)
        return None

    def _scan_raw_text(self, tag: str) -> Token | None:
        start = self.pos
        end_tag = re.compile(rf"</{re.escape(tag)}(?=[\s/>])", re.IGNORECASE)
        match = end_tag.search(self.source, start)
        end = match.start() if match else self.length

        self._raw_text_tag = None
        self.pos = end
        if end < self.length:
            self.state = State.SCANNING_TAG_OPEN

        if end == start:
            return None
        data = self.source[start:end]
        if tag in ESCAPABLE_RAW_TEXT_ELEMENTS:
            data = html.unescape(data)
        return Characters(data, start)

    # ------------------------------------------------------------------
    # Comments and declarations
    # ------------------------------------------------------------------

    def _scan_comment(self) -> Token:
        start = self.pos
        end = self.source.find("-->", start + 2)
        if end == -1:
            raise self._fail("Unterminated comment", start)

        data = self.source[start + 4:end] if end >= start + 4 else ""
        self.pos = end + 3
        self.state = State.SCANNING_TEXT
        return CommentToken(data, start)

    def _skip_declaration(self) -> None:
        # <!DOCTYPE ...>, <![CDATA[...]]>, <?xml ...?>
        start = self.pos
        end = self.source.find(">", start)
        if end == -1:
            raise self._fail("Unterminated declaration", start)
        logger.debug(f"Skipping declaration at offset {start}")
        self.pos = end + 1
        self.state = State.SCANNING_TEXT

    # ------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------

    def _scan_tag_open(self) -> Token | None:
        source = self.source
        start = self.pos

        if source.startswith("<!", start) or source.startswith("<?", start):
            self._skip_declaration()
            return None

        if source.startswith("</", start):
            return self._scan_end_tag(start)

        match = _TAG_NAME_RE.match(source, start + 1)
        # _find_markup_start guarantees a letter after "<"
        name = canonical_tag_name(match.group(0))
        self.pos = match.end()
        self.state = State.SCANNING_ATTRIBUTES
        attributes, self_closing = self._scan_attributes(start)

        self.state = State.SCANNING_TEXT
        if not self_closing and (name in RAW_TEXT_ELEMENTS or name in ESCAPABLE_RAW_TEXT_ELEMENTS):
            self._raw_text_tag = name
        return StartTag(name, attributes, self_closing, start)

    def _scan_end_tag(self, start: int) -> Token | None:
        source = self.source
        close = source.find(">", start)
        if close == -1:
            raise self._fail("Unterminated end tag", start)

        self.pos = close + 1
        self.state = State.SCANNING_TEXT
        match = _TAG_NAME_RE.match(source, start + 2)
        if match is None or match.start() >= close:
            # "</>"
            return None
        return EndTag(canonical_tag_name(match.group(0)), start)

    def _skip_whitespace(self) -> None:
        self.pos = _WHITESPACE_RE.match(self.source, self.pos).end()

    def _scan_attributes(self, tag_start: int) -> tuple[list[tuple[str, str | None]], bool]:
        source = self.source
        attributes: list[tuple[str, str | None]] = []

        while True:
            self._skip_whitespace()
            if self.pos >= self.length:
                raise self._fail("Unterminated tag", tag_start)

            char = source[self.pos]
            if char == ">":
                self.pos += 1
                return attributes, False
            if char == "/":
                if source.startswith("/>", self.pos):
                    self.pos += 2
                    return attributes, True
                self.pos += 1
                continue

            name_match = _ATTR_NAME_RE.match(source, self.pos)
            name = name_match.group(0)
            self.pos = name_match.end()

            self._skip_whitespace()
            value: str | None = None
            if source.startswith("=", self.pos):
                self.pos += 1
                self._skip_whitespace()
                value = self._scan_attribute_value(tag_start)

            _add_attribute(attributes, name, value)

    def _scan_attribute_value(self, tag_start: int) -> str:
        source = self.source
        if self.pos >= self.length:
            raise self._fail("Unterminated tag", tag_start)

        quote = source[self.pos]
        if quote in ('"', "'"):
            value_start = self.pos
            end = source.find(quote, value_start + 1)
            if end == -1:
                raise self._fail("Unterminated attribute value", value_start)
            self.pos = end + 1
            return html.unescape(source[value_start + 1:end])

        match = _UNQUOTED_VALUE_RE.match(source, self.pos)
        self.pos = match.end()
        return html.unescape(match.group(0))


def tokenize(source: str) -> list[Token]:
    """Tokenize ``source`` eagerly."""
    return list(Tokenizer(source))
