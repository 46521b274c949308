"""Shared test fixtures and configuration."""

import os
from unittest.mock import patch

import pytest

from html2rsx.config import EmitterConfig, ParserConfig, Settings, reload_settings


@pytest.fixture(autouse=True)
def clean_environment():
    """Run every test without RSX_* variables and with fresh global settings."""
    cleaned = {key: value for key, value in os.environ.items() if not key.startswith("RSX_")}
    with patch.dict(os.environ, cleaned, clear=True):
        reload_settings()
        yield
    reload_settings()


@pytest.fixture
def settings():
    """Fixture providing default settings."""
    return Settings()


@pytest.fixture
def strict_settings():
    """Fixture providing settings with strict tag checking."""
    return Settings(emitter=EmitterConfig(strict=True))


@pytest.fixture
def emitter_config():
    """Fixture providing default emitter settings."""
    return EmitterConfig()


@pytest.fixture
def parser_config():
    """Fixture providing default parser settings."""
    return ParserConfig()


@pytest.fixture
def hero_html():
    """The canonical hero section example."""
    return """<div id="hero" class="container">
    <p>This is awesome!</p>
    <br />
</div>"""


@pytest.fixture
def realistic_html():
    """A full page written on one line."""
    return (
        '<html><head><title>HTML Tutorial</title></head><body id="body">'
        "<h1>This is a heading</h1>"
        '<p class="bold">This is a paragraph.</p></body></html>'
    )


@pytest.fixture
def svg_icon_html():
    """Small SVG icon with camelCase attributes and self-closing paths."""
    return (
        '<svg width="800px" height="800px" viewBox="0 0 1024 1024" class="icon"  '
        'version="1.1" xmlns="http://www.w3.org/2000/svg">'
        '<path d="M512 301.2m-10 0a10 10 0 1 0 20 0 10 10 0 1 0-20 0Z" fill="#E73B37" />'
        '<path d="M400.3 744.5c2.1-0.7 4.1-1.4 6.2-2z" fill="#39393A" />'
        "</svg>"
    )


@pytest.fixture
def form_html():
    """A login form with boolean attributes, labels and a reserved-word attribute."""
    return """
<form action="/login" method="post">
  <label for="user">User</label>
  <input type="text" id="user" name="user" required>
  <input type="password" name="pass" autocomplete="off">
  <select name="remember">
    <option value="yes" selected>Yes
    <option value="no">No
  </select>
  <button type="submit" disabled>Sign in</button>
</form>
"""
