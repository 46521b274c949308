"""Document tree produced by the parser and consumed by the emitter."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from ..elements import is_void


@dataclass
class Text:
    """Decoded character data."""
    content: str


@dataclass
class Comment:
    """Comment body, kept verbatim."""
    content: str


@dataclass
class Element:
    """An element with ordered attributes and owned children.

    An attribute value of ``None`` marks a boolean-style attribute that was
    written without a value (``<input disabled>``).
    """
    tag: str
    attributes: list[tuple[str, str | None]] = field(default_factory=list)
    children: list["Node"] = field(default_factory=list)
    self_closing: bool = False

    @property
    def is_void(self) -> bool:
        return is_void(self.tag)

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of attribute ``name`` (case-insensitive)."""
        lowered = name.lower()
        for key, value in self.attributes:
            if key.lower() == lowered:
                return value
        return default


Node = Element | Text | Comment


@dataclass
class Document:
    """An ordered fragment of top-level nodes."""
    children: list[Node] = field(default_factory=list)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def walk(self) -> Iterator[Node]:
        """Yield every node in document order without recursion."""
        stack: list[Node] = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            if isinstance(node, Element):
                stack.extend(reversed(node.children))
