"""HTML attribute name -> RSX attribute key translation.

Translation is table driven. ``ATTRIBUTE_RULES`` holds every name that needs
special treatment; everything else goes through the generic rules of
``translate_attribute``:

1. ``data-*`` names are written as quoted string keys (``"data-id": "7"``).
2. Hyphens become underscores (``aria-label`` -> ``aria_label``).
3. camelCase becomes snake_case (``viewBox`` -> ``view_box``).
4. A result that is a Rust keyword is looked up in the table again, and a
   result that is still not a valid identifier is written as a quoted key.
"""

import re
from dataclasses import dataclass
from enum import Enum

from .escaping import to_string_literal


class RuleKind(str, Enum):
    """How an attribute name is written as an RSX key."""

    VERBATIM = "verbatim"
    RAW = "raw"
    RENAME = "rename"
    QUOTED = "quoted"


@dataclass(frozen=True)
class AttributeRule:
    kind: RuleKind
    replacement: str | None = None

    def apply(self, name: str) -> str:
        if self.kind is RuleKind.RAW:
            return f"r#{name}"
        if self.kind is RuleKind.RENAME:
            return self.replacement
        if self.kind is RuleKind.QUOTED:
            return to_string_literal(name)
        return name


# Strict and reserved keywords of the host language
RUST_KEYWORDS = frozenset(
    {
        "abstract", "as", "async", "await", "become", "box", "break", "const",
        "continue", "crate", "do", "dyn", "else", "enum", "extern", "false",
        "final", "fn", "for", "gen", "if", "impl", "in", "let", "loop", "macro",
        "match", "mod", "move", "mut", "override", "priv", "pub", "ref",
        "return", "self", "Self", "static", "struct", "super", "trait", "true",
        "try", "type", "typeof", "unsafe", "unsized", "use", "virtual", "where",
        "while", "yield",
    }
)

# Keywords that cannot be written as raw identifiers
NON_RAW_KEYWORDS = frozenset({"self", "Self", "super", "crate", "_"})

ATTRIBUTE_RULES: dict[str, AttributeRule] = {
    **{keyword: AttributeRule(RuleKind.RAW) for keyword in RUST_KEYWORDS - NON_RAW_KEYWORDS},
    **{keyword: AttributeRule(RuleKind.QUOTED) for keyword in NON_RAW_KEYWORDS},
    "class": AttributeRule(RuleKind.VERBATIM),
    "id": AttributeRule(RuleKind.VERBATIM),
    "http-equiv": AttributeRule(RuleKind.RENAME, "http_equiv"),
    "accept-charset": AttributeRule(RuleKind.RENAME, "accept_charset"),
    "xlink:href": AttributeRule(RuleKind.RENAME, "xlink_href"),
    "xml:lang": AttributeRule(RuleKind.RENAME, "xml_lang"),
    "xml:space": AttributeRule(RuleKind.RENAME, "xml_space"),
    "xmlns:xlink": AttributeRule(RuleKind.RENAME, "xmlns_xlink"),
}

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_IDENTIFIER_RE = re.compile(r"[a-z_][a-z0-9_]*")


def to_snake_case(name: str) -> str:
    """``viewBox`` -> ``view_box``, ``SomeAttribute`` -> ``some_attribute``, ``aria-label`` -> ``aria_label``."""
    return _CAMEL_BOUNDARY_RE.sub("_", name).replace("-", "_").lower()


def translate_attribute(name: str) -> str:
    """Return the RSX key for HTML attribute ``name``."""
    rule = ATTRIBUTE_RULES.get(name)
    if rule is not None:
        return rule.apply(name)

    if name.lower().startswith("data-"):
        return to_string_literal(name)

    key = to_snake_case(name)
    rule = ATTRIBUTE_RULES.get(key)
    if rule is not None:
        return rule.apply(key)

    if not _IDENTIFIER_RE.fullmatch(key):
        return to_string_literal(name)
    return key
