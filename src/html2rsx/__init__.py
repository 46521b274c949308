"""html2rsx - Convert HTML markup into RSX component template source."""

from importlib.metadata import PackageNotFoundError, version

from .converter import convert
from .emitter import emit, translate_attribute
from .errors import (
    ConversionError,
    EmitError,
    InvalidVoidElementChildrenError,
    MalformedTagError,
    ParseError,
    UnknownTagError,
)
from .models import Comment, Document, Element, Text
from .parser import parse

try:
    __version__ = version("html2rsx")
except PackageNotFoundError:
    __version__ = "0.0.0"  # Fallback for development

__all__ = [
    "Comment",
    "ConversionError",
    "Document",
    "Element",
    "EmitError",
    "InvalidVoidElementChildrenError",
    "MalformedTagError",
    "ParseError",
    "Text",
    "UnknownTagError",
    "convert",
    "emit",
    "parse",
    "translate_attribute",
]
