"""Stack-based tree construction from the token stream."""

import logging

from ..config import ParserConfig, get_settings
from ..elements import BLOCK_ELEMENTS, IMPLIED_END_TAGS, is_void
from ..models import Comment, Document, Element, Node, Text
from .soup import parse_soup
from .tokenizer import Characters, CommentToken, EndTag, StartTag, Token, Tokenizer

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Build a ``Document`` from tokens the way a permissive browser parser does.

    Open elements live on a stack and are attached to their parent when they
    are closed, either explicitly, implicitly by an end tag of an ancestor,
    by an implied end tag, or at end of input.
    """

    def __init__(self):
        self.document = Document()
        self._open: list[Element] = []
        self._finished = False

    def _attach(self, node: Node) -> None:
        siblings = self._open[-1].children if self._open else self.document.children
        if isinstance(node, Text) and siblings and isinstance(siblings[-1], Text):
            siblings[-1].content += node.content
            return
        siblings.append(node)

    def _close_current(self) -> Element:
        element = self._open.pop()
        self._attach(element)
        return element

    def feed(self, token: Token) -> None:
        if self._finished:
            raise RuntimeError("Cannot feed tokens after finish()")

        if isinstance(token, Characters):
            self._attach(Text(token.data))
        elif isinstance(token, CommentToken):
            self._attach(Comment(token.data))
        elif isinstance(token, StartTag):
            self._start_tag(token)
        elif isinstance(token, EndTag):
            self._end_tag(token)
        else:
            raise TypeError(f"Unsupported token: {token!r}")

    def _start_tag(self, token: StartTag) -> None:
        closes = IMPLIED_END_TAGS.get(token.name, frozenset())
        while self._open and self._open[-1].tag in closes:
            logger.debug(f"<{token.name}> implicitly closes <{self._open[-1].tag}>")
            self._close_current()

        if token.name in BLOCK_ELEMENTS and self._open and self._open[-1].tag == "p":
            logger.debug(f"<{token.name}> implicitly closes <p>")
            self._close_current()

        element = Element(token.name, list(token.attributes))
        if is_void(token.name) or token.self_closing:
            element.self_closing = True
            self._attach(element)
            return

        self._open.append(element)

    def _end_tag(self, token: EndTag) -> None:
        if is_void(token.name):
            logger.debug(f"Ignoring end tag of void element </{token.name}>")
            return

        wanted = token.name.lower()
        for depth in range(len(self._open) - 1, -1, -1):
            if self._open[depth].tag.lower() == wanted:
                break
        else:
            logger.debug(f"Ignoring stray end tag </{token.name}> at offset {token.offset}")
            return

        while len(self._open) - 1 > depth:
            unclosed = self._close_current()
            logger.debug(f"</{token.name}> implicitly closes <{unclosed.tag}>")
        self._close_current()

    def finish(self) -> Document:
        """Flush every still-open element into its parent and return the document."""
        if self._open:
            logger.debug(f"Closing {len(self._open)} element(s) left open at end of input")
        while self._open:
            self._close_current()
        self._finished = True
        return self.document


def parse(html: str, settings: ParserConfig | None = None) -> Document:
    """
    Parse an HTML fragment into a document tree.

    Args:
        html: HTML markup, possibly with several top-level nodes
        settings: Parser settings (loads from get_settings() if not provided)

    Returns:
        The parsed document

    Raises:
        MalformedTagError: If the markup cannot be tokenized
    """
    if settings is None:
        settings = get_settings().parser

    source = html.strip() if settings.trim_input else html

    if settings.backend != "native":
        return parse_soup(source, features=settings.backend)

    builder = TreeBuilder()
    for token in Tokenizer(source):
        builder.feed(token)
    return builder.finish()
