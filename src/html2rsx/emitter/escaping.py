"""String literal escaping and whitespace normalization for RSX output."""

import re

_STRING_ESCAPES = str.maketrans(
    {
        "\\": "\\\\",
        '"': '\\"',
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
    }
)

# RSX string literals are format strings, literal braces are doubled
_FORMAT_ESCAPES = str.maketrans({"{": "{{", "}": "}}"})

# HTML whitespace only. U+00A0 from &nbsp; is content.
HTML_WHITESPACE = " \t\n\r\f"
_WHITESPACE_RUN_RE = re.compile(r"[ \t\n\r\f]+")


def escape_string(value: str) -> str:
    """Escape backslash, double quote, newline, carriage return and tab."""
    return value.translate(_STRING_ESCAPES)


def to_string_literal(value: str) -> str:
    """Quote ``value`` as a string literal without format-brace escaping."""
    return f'"{escape_string(value)}"'


def to_rsx_literal(value: str) -> str:
    """Quote ``value`` as an RSX string literal (text node or attribute value)."""
    return f'"{escape_string(value).translate(_FORMAT_ESCAPES)}"'


def format_attribute_value(value: str | None) -> str:
    """Render an attribute value; valueless attributes become ``true``."""
    if value is None:
        return "true"
    return to_rsx_literal(value)


def is_whitespace_only(text: str) -> bool:
    return not text.strip(HTML_WHITESPACE)


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RUN_RE.sub(" ", text)
