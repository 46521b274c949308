"""RSX emission: attribute translation, escaping and tree rendering."""

from .attributes import ATTRIBUTE_RULES, AttributeRule, RuleKind, translate_attribute
from .escaping import escape_string, format_attribute_value, to_rsx_literal
from .rsx import RsxEmitter, emit

__all__ = [
    "ATTRIBUTE_RULES",
    "AttributeRule",
    "RsxEmitter",
    "RuleKind",
    "emit",
    "escape_string",
    "format_attribute_value",
    "to_rsx_literal",
    "translate_attribute",
]
