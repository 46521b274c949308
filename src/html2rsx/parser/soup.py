"""Alternate document producer backed by BeautifulSoup.

Lets the emitter consume trees built by lxml or the standard library
``html.parser`` tree builder. These parsers accept any input, so this
producer never raises ``MalformedTagError``. Both lowercase attribute names,
which means SVG attributes such as ``viewBox`` reach the emitter as
``viewbox``.
"""

import logging
import re

from bs4 import (
    BeautifulSoup,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)
from bs4 import Comment as SoupComment

from ..elements import canonical_tag_name, is_void
from ..models import Comment, Document, Element, Node, Text

logger = logging.getLogger(__name__)

# lxml wraps fragments in these, but only when the input did not write them
_IMPLIED_WRAPPERS = ("html", "head", "body")
_SKIPPED_STRINGS = (Doctype, Declaration, ProcessingInstruction)


def _written_in_source(tag_name: str, source: str) -> bool:
    return re.search(rf"<{tag_name}[\s/>]", source, re.IGNORECASE) is not None


def _unwrap_implied(nodes: list, source: str) -> list:
    result = []
    pending = list(nodes)
    while pending:
        node = pending.pop(0)
        if (
            isinstance(node, Tag)
            and node.name in _IMPLIED_WRAPPERS
            and not _written_in_source(node.name, source)
        ):
            pending = list(node.contents) + pending
            continue
        result.append(node)
    return result


def _convert_attributes(tag: Tag) -> list[tuple[str, str | None]]:
    attributes: list[tuple[str, str | None]] = []
    for name, value in tag.attrs.items():
        # class, rel and friends come back as lists
        if isinstance(value, list):
            value = " ".join(value)
        attributes.append((name, value))
    return attributes


def _convert_string(string: NavigableString) -> Node | None:
    if isinstance(string, _SKIPPED_STRINGS):
        return None
    if isinstance(string, SoupComment):
        return Comment(str(string))
    return Text(str(string))


def parse_soup(html: str, features: str = "lxml") -> Document:
    """
    Build a document from a BeautifulSoup parse tree.

    Args:
        html: HTML markup
        features: BeautifulSoup tree builder ("lxml" or "html.parser")

    Returns:
        The converted document
    """
    soup = BeautifulSoup(html, features)
    roots = soup.contents
    if features == "lxml":
        roots = _unwrap_implied(roots, html)

    document = Document()
    # (bs4 node, list receiving the converted node)
    stack = [(node, document.children) for node in reversed(roots)]
    while stack:
        source_node, siblings = stack.pop()

        if isinstance(source_node, NavigableString):
            converted = _convert_string(source_node)
            if converted is not None:
                siblings.append(converted)
            continue

        if not isinstance(source_node, Tag):
            logger.debug(f"Skipping unsupported soup node {type(source_node).__name__}")
            continue

        element = Element(
            canonical_tag_name(source_node.name),
            _convert_attributes(source_node),
            self_closing=is_void(source_node.name),
        )
        siblings.append(element)
        for child in reversed(source_node.contents):
            stack.append((child, element.children))

    return document
