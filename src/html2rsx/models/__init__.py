"""Document tree models."""

from .nodes import Comment, Document, Element, Node, Text

__all__ = ["Comment", "Document", "Element", "Node", "Text"]
