#!/usr/bin/env python3
"""
Basic Usage Example

This example demonstrates converting HTML snippets into RSX with the
default settings, with custom settings, and how conversion errors surface.

Usage:
    python examples/basic_usage.py

Requirements:
    - html2rsx installed (pip install -e .)
"""

from html2rsx import ConversionError, convert
from html2rsx.config import EmitterConfig, Settings
from html2rsx.logging_config import setup_logging

SNIPPETS = {
    "hero": """
<div id="hero" class="container">
    <p>This is awesome!</p>
    <br />
</div>
""",
    "form": '<form><label for="q">Search</label><input type="search" id="q" autofocus></form>',
    "svg": '<svg viewBox="0 0 24 24"><path d="M0 0h24v24H0z" fill="none"/></svg>',
    "custom": "<my-widget data-size='l'>Hello {user}</my-widget>",
}

BROKEN_SNIPPETS = {
    "unterminated tag": "<div",
    "unterminated attribute": '<a href="/home>Home</a>',
}


def convert_with_defaults():
    """Convert each snippet with the default settings."""
    print("📄 Default settings")
    for name, html in SNIPPETS.items():
        print(f"\n--- {name} ---")
        print(convert(html), end="")


def convert_with_custom_settings():
    """Use four-space indentation and reject non-standard tags."""
    print("\n⚙️  Custom settings (indent_width=4, strict=True)")
    settings = Settings(emitter=EmitterConfig(indent_width=4, strict=True))
    for name, html in SNIPPETS.items():
        try:
            print(f"\n--- {name} ---")
            print(convert(html, settings), end="")
        except ConversionError as e:
            print(f"❌ {type(e).__name__}: {e}")


def show_errors():
    """Malformed markup raises a ParseError with its location."""
    print("\n🚨 Malformed input")
    for name, html in BROKEN_SNIPPETS.items():
        try:
            convert(html)
        except ConversionError as e:
            print(f"❌ {name}: {type(e).__name__}: {e}")


def main():
    settings = Settings()
    setup_logging(settings.logging)
    for message in settings.validate_settings():
        print(message)

    convert_with_defaults()
    convert_with_custom_settings()
    show_errors()


if __name__ == "__main__":
    main()
