"""Tests for the [wtbe_cta] shortcode."""

import pytest
from bs4 import BeautifulSoup

from table_extended import hooks
from table_extended.shortcodes import cta
from table_extended.shortcodes.base import (
    build_attributes,
    esc_url,
    sanitize_class_list,
    sanitize_html_class,
    shortcode_atts,
    to_bool,
)


def _anchor(html: str):
    return BeautifulSoup(html, "html.parser").a


class TestRender:
    def test_defaults(self) -> None:
        assert cta.handle({}) == (
            '<a href="#" class="wtbe-cta" target="_blank" rel="noopener noreferrer">Click Here</a>'
        )

    def test_non_mapping_attributes_use_defaults(self) -> None:
        assert cta.handle("") == cta.handle({})
        assert cta.handle(None) == cta.handle({})

    def test_nofollow_new_tab(self) -> None:
        html = cta.handle(
            {"url": "https://x.com", "label": "Go", "newtab": "true", "nofollow": "true"}
        )
        assert html == (
            '<a href="https://x.com" class="wtbe-cta" target="_blank" '
            'rel="nofollow noopener noreferrer">Go</a>'
        )

    def test_same_tab_omits_target_and_rel(self) -> None:
        assert cta.handle({"newtab": "false"}) == '<a href="#" class="wtbe-cta">Click Here</a>'

    def test_rel_order(self) -> None:
        html = cta.handle({"newtab": "yes", "nofollow": "1", "sponsored": "ON"})
        assert _anchor(html)["rel"] == ["nofollow", "sponsored", "noopener", "noreferrer"]
        assert 'rel="nofollow sponsored noopener noreferrer"' in html

    def test_sponsored_without_new_tab(self) -> None:
        html = cta.handle({"newtab": "0", "sponsored": "true"})
        assert 'rel="sponsored"' in html
        assert "target" not in html

    def test_extra_classes_are_sanitized_per_token(self) -> None:
        html = cta.handle({"class": "  big  red!  <x> "})
        assert 'class="wtbe-cta big red x"' in html

    def test_id_only_when_not_blank(self) -> None:
        assert "id=" not in cta.handle({"id": "   "})
        html = cta.handle({"id": " promo "})
        assert 'class="wtbe-cta" id="promo" target="_blank"' in html

    def test_id_is_escaped(self) -> None:
        html = cta.handle({"id": 'a"b'})
        assert 'id="a&quot;b"' in html

    def test_label_is_escaped(self) -> None:
        html = cta.handle({"label": "<b>Go</b> & more"})
        assert "&lt;b&gt;Go&lt;/b&gt; &amp; more</a>" in html
        assert _anchor(html).get_text() == "<b>Go</b> & more"

    def test_disallowed_protocol_falls_back_to_hash(self) -> None:
        assert _anchor(cta.handle({"url": "javascript:alert(1)"}))["href"] == "#"

    def test_empty_url_falls_back_to_hash(self) -> None:
        assert _anchor(cta.handle({"url": "  "}))["href"] == "#"

    def test_ampersand_in_url_is_escaped(self) -> None:
        html = cta.handle({"url": "https://x.com/?a=1&b=2"})
        assert 'href="https://x.com/?a=1&amp;b=2"' in html

    def test_unknown_attributes_are_dropped(self) -> None:
        html = cta.handle({"onclick": "steal()", "style": "color:red"})
        assert "onclick" not in html
        assert "style" not in html


class TestFilters:
    def test_cta_classes_filter(self) -> None:
        def add_button(classes):
            return classes + ["button primary"]

        hooks.cta_classes.connect(add_button)
        try:
            html = cta.handle({})
        finally:
            hooks.cta_classes.disconnect(add_button)

        assert 'class="wtbe-cta button primary"' in html

    def test_cta_rel_filter(self) -> None:
        seen = []

        def drop_noreferrer(rel_parts, newtab, nofollow, sponsored):
            seen.append((newtab, nofollow, sponsored))
            return [part for part in rel_parts if part != "noreferrer"]

        hooks.cta_rel.connect(drop_noreferrer)
        try:
            html = cta.handle({"nofollow": "true"})
        finally:
            hooks.cta_rel.disconnect(drop_noreferrer)

        assert 'rel="nofollow noopener"' in html
        assert seen == [(True, True, False)]

    def test_shortcode_atts_filter(self) -> None:
        calls = []

        def force_label(atts, tag, content):
            calls.append((tag, content))
            return {**atts, "label": "Filtered"}

        hooks.shortcode_atts.connect(force_label)
        try:
            html = cta.handle({"label": "Original"}, "body")
        finally:
            hooks.shortcode_atts.disconnect(force_label)

        assert ">Filtered</a>" in html
        assert calls == [("wtbe_cta", "body")]


class TestToBool:
    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "on", " On ", True, 1])
    def test_truthy(self, value) -> None:
        assert to_bool(value) is True

    @pytest.mark.parametrize("value", ["0", "false", "no", "off", "", None, "maybe", "2", False, 0])
    def test_falsy(self, value) -> None:
        assert to_bool(value) is False


class TestEscUrl:
    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://example.com/path", "https://example.com/path"),
            ("  /pricing ", "/pricing"),
            ("#section", "#section"),
            ("?page=2", "?page=2"),
            ("mailto:sales@example.com", "mailto:sales@example.com"),
            ("example.com/page", "http://example.com/page"),
            ("HTTPS://Example.com", "HTTPS://Example.com"),
            ("https://example.com/a b", "https://example.com/a%20b"),
            ('https://example.com/?q="x"', "https://example.com/?q=%22x%22"),
        ],
    )
    def test_allowed(self, url, expected) -> None:
        assert esc_url(url) == expected

    @pytest.mark.parametrize(
        "url",
        [
            "",
            None,
            "javascript:alert(1)",
            "JavaScript:alert(1)",
            "java\nscript:alert(1)",
            "data:text/html,<script>alert(1)</script>",
            "vbscript:msgbox",
            "java%0%0aascript:alert(1)",
            "java%0%0d%0a%0Aascript:alert(1)",
        ],
    )
    def test_rejected(self, url) -> None:
        assert esc_url(url) == ""

    @pytest.mark.parametrize(
        "url",
        ["https://x.com/%0%0aa", "https://x.com/%0%0Aa", "https://x.com/%%0a0a", "https://x.com/%0\n%0da"],
    )
    def test_nested_control_sequences_are_removed(self, url) -> None:
        assert esc_url(url) == "https://x.com/a"

    def test_protocols_from_settings(self, settings) -> None:
        settings.TABLE_EXTENDED = {"ALLOWED_PROTOCOLS": ["https"]}
        assert esc_url("http://example.com") == ""
        assert esc_url("https://example.com") == "https://example.com"


class TestHelpers:
    def test_shortcode_atts_keeps_known_keys(self) -> None:
        assert shortcode_atts({"a": "1", "b": "2"}, {"b": "x", "c": "y"}) == {"a": "1", "b": "x"}

    def test_sanitize_html_class(self) -> None:
        assert sanitize_html_class("my-class_1") == "my-class_1"
        assert sanitize_html_class("bad%20class!") == "badclass"
        assert sanitize_html_class("!!!", "fallback") == "fallback"

    def test_sanitize_class_list_splits_entries(self) -> None:
        assert sanitize_class_list(["wtbe-cta", "a b", "", "@"]) == ["wtbe-cta", "a", "b"]

    def test_build_attributes_keeps_order_and_skips_empty(self) -> None:
        html = build_attributes(
            {"href": "#", "hidden": True, "id": None, "target": False, "title": 'a"b'}
        )
        assert html == 'href="#" hidden title="a&quot;b"'
