"""Tests for the attribute name translation table."""

import pytest

from html2rsx.emitter import ATTRIBUTE_RULES, AttributeRule, RuleKind, translate_attribute
from html2rsx.emitter.attributes import NON_RAW_KEYWORDS, RUST_KEYWORDS, to_snake_case


@pytest.mark.unit
class TestTranslationTable:
    """Test the explicit lookup table."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("class", "class"),
            ("id", "id"),
            ("type", "r#type"),
            ("for", "r#for"),
            ("async", "r#async"),
            ("loop", "r#loop"),
            ("as", "r#as"),
            ("http-equiv", "http_equiv"),
            ("accept-charset", "accept_charset"),
            ("xlink:href", "xlink_href"),
            ("xml:lang", "xml_lang"),
            ("self", '"self"'),
            ("super", '"super"'),
        ],
    )
    def test_table_entries(self, name, expected):
        assert translate_attribute(name) == expected

    def test_every_raw_keyword_is_in_table(self):
        for keyword in RUST_KEYWORDS - NON_RAW_KEYWORDS:
            assert ATTRIBUTE_RULES[keyword].kind is RuleKind.RAW

    def test_non_raw_keywords_are_quoted(self):
        for keyword in NON_RAW_KEYWORDS:
            assert ATTRIBUTE_RULES[keyword].kind is RuleKind.QUOTED

    @pytest.mark.parametrize(
        "rule, expected",
        [
            (AttributeRule(RuleKind.VERBATIM), "name"),
            (AttributeRule(RuleKind.RAW), "r#name"),
            (AttributeRule(RuleKind.RENAME, "other"), "other"),
            (AttributeRule(RuleKind.QUOTED), '"name"'),
        ],
    )
    def test_rule_kinds(self, rule, expected):
        assert rule.apply("name") == expected


@pytest.mark.unit
class TestGenericRules:
    """Test names that are not in the table."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("href", "href"),
            ("viewBox", "view_box"),
            ("SomeAttribute", "some_attribute"),
            ("CLASS", "class"),
            ("aria-label", "aria_label"),
            ("stroke-width", "stroke_width"),
            ("tabindex", "tabindex"),
            ("Type", "r#type"),
            ("FOR", "r#for"),
        ],
    )
    def test_snake_case_translation(self, name, expected):
        assert translate_attribute(name) == expected

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("data-id", '"data-id"'),
            ("data-user-name", '"data-user-name"'),
            ("@click", '"@click"'),
            ("x-on:click", '"x-on:click"'),
            (":class", '":class"'),
            ("2col", '"2col"'),
        ],
    )
    def test_non_identifiers_are_quoted(self, name, expected):
        assert translate_attribute(name) == expected

    def test_quoted_keys_are_escaped(self):
        assert translate_attribute('a"b') == '"a\\"b"'

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("viewBox", "view_box"),
            ("preserveAspectRatio", "preserve_aspect_ratio"),
            ("aria-hidden", "aria_hidden"),
            ("plain", "plain"),
        ],
    )
    def test_to_snake_case(self, name, expected):
        assert to_snake_case(name) == expected
