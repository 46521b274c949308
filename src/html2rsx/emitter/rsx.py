"""Render a document tree as RSX source text."""

import logging
from dataclasses import dataclass

from ..config import EmitterConfig, get_settings
from ..elements import PREFORMATTED_ELEMENTS, is_known
from ..errors import InvalidVoidElementChildrenError, UnknownTagError
from ..models import Comment, Document, Element, Node, Text
from .attributes import translate_attribute
from .escaping import (
    HTML_WHITESPACE,
    collapse_whitespace,
    format_attribute_value,
    is_whitespace_only,
    to_rsx_literal,
)

logger = logging.getLogger(__name__)


@dataclass
class _ClosingBrace:
    depth: int


@dataclass
class _Pending:
    node: Node
    depth: int
    preformatted: bool


class RsxEmitter:
    """Walks a document with an explicit work stack and collects output lines."""

    def __init__(self, settings: EmitterConfig):
        self.settings = settings
        self.indent_unit = " " * settings.indent_width

    def emit(self, document: Document) -> str:
        lines: list[str] = []
        stack: list[_Pending | _ClosingBrace] = [
            _Pending(node, 0, False)
            for node in reversed(self.prepare_children(document.children, preformatted=False))
        ]

        while stack:
            work = stack.pop()
            if isinstance(work, _ClosingBrace):
                lines.append(f"{self.indent_unit * work.depth}}}")
                continue

            indent = self.indent_unit * work.depth
            node = work.node
            if isinstance(node, Element):
                self._emit_element(node, work.depth, work.preformatted, lines, stack)
            elif isinstance(node, Text):
                lines.append(f"{indent}{to_rsx_literal(node.content)}")
            elif isinstance(node, Comment):
                lines.extend(self._comment_lines(node, indent))
            else:
                raise TypeError(f"Unsupported node: {node!r}")

        if not lines:
            return ""
        return "\n".join(lines) + "\n"

    def prepare_children(self, children: list[Node], preformatted: bool) -> list[Node]:
        """Return the children that are emitted, with text normalized.

        Whitespace-only text is dropped outside preformatted elements. With
        normalization on, whitespace runs collapse to one space and the outer
        edges of the first and last emitted child are trimmed. The input
        nodes are never modified.
        """
        kept: list[Node] = []
        for child in children:
            if isinstance(child, Comment) and not self.settings.keep_comments:
                continue
            if isinstance(child, Text):
                if not child.content:
                    continue
                if not preformatted and is_whitespace_only(child.content):
                    continue
            kept.append(child)

        if preformatted or not self.settings.normalize_whitespace:
            return kept

        last = len(kept) - 1
        normalized: list[Node] = []
        for index, child in enumerate(kept):
            if isinstance(child, Text):
                content = collapse_whitespace(child.content)
                if index == 0:
                    content = content.lstrip(HTML_WHITESPACE)
                if index == last:
                    content = content.rstrip(HTML_WHITESPACE)
                child = Text(content)
            normalized.append(child)
        return normalized

    def _check_tag(self, tag: str) -> None:
        if self.settings.strict and not is_known(tag):
            raise UnknownTagError(tag)

    def _emit_element(
        self,
        element: Element,
        depth: int,
        preformatted: bool,
        lines: list[str],
        stack: list,
    ) -> None:
        self._check_tag(element.tag)
        indent = self.indent_unit * depth

        children = element.children
        if element.is_void and children:
            if self.settings.void_children == "error":
                raise InvalidVoidElementChildrenError(element.tag, len(children))
            logger.warning(
                f"Dropping {len(children)} child node(s) of void element <{element.tag}>"
            )
            children = []

        inner_preformatted = preformatted or element.tag in PREFORMATTED_ELEMENTS
        rendered = self.prepare_children(children, inner_preformatted)

        if not element.attributes and not rendered:
            lines.append(f"{indent}{element.tag} {{}}")
            return

        lines.append(f"{indent}{element.tag} {{")
        attribute_indent = indent + self.indent_unit
        for key, value in self._translated_attributes(element):
            lines.append(f"{attribute_indent}{key}: {format_attribute_value(value)},")

        stack.append(_ClosingBrace(depth))
        for child in reversed(rendered):
            stack.append(_Pending(child, depth + 1, inner_preformatted))

    @staticmethod
    def _translated_attributes(element: Element) -> list[tuple[str, str | None]]:
        # Distinct HTML names can share an RSX key (aria-label, ariaLabel).
        # The first keeps its slot, the last value wins.
        translated: list[tuple[str, str | None]] = []
        slots: dict[str, int] = {}
        for name, value in element.attributes:
            key = translate_attribute(name)
            if key in slots:
                translated[slots[key]] = (key, value)
            else:
                slots[key] = len(translated)
                translated.append((key, value))
        return translated

    @staticmethod
    def _comment_lines(comment: Comment, indent: str) -> list[str]:
        body = comment.content.strip(HTML_WHITESPACE)
        if not body:
            return [f"{indent}//"]
        lines = []
        for line in body.splitlines():
            line = line.rstrip(HTML_WHITESPACE)
            lines.append(f"{indent}// {line}" if line else f"{indent}//")
        return lines


def emit(document: Document, settings: EmitterConfig | None = None) -> str:
    """
    Render a document as RSX source text.

    Args:
        document: Parsed document tree
        settings: Emitter settings (loads from get_settings() if not provided)

    Returns:
        RSX text, one construct per line, newline-terminated

    Raises:
        UnknownTagError: In strict mode, for a tag outside the known element sets
        InvalidVoidElementChildrenError: For a void element with children when
            ``void_children`` is "error"
    """
    if settings is None:
        settings = get_settings().emitter
    return RsxEmitter(settings).emit(document)
