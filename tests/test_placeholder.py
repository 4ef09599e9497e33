"""Tests for the [wtbe_placeholder] shortcode."""

import pytest
from bs4 import BeautifulSoup

from table_extended.shortcodes import placeholder
from table_extended.shortcodes.placeholder import (
    ERROR_CLASS,
    ERROR_STYLE,
    PADDING_FALLBACK,
    PADDING_VAR,
    calculate_width,
    sanitize_width,
)

REQUIRED_MESSAGE = "Error: width attribute is required for [wtbe_placeholder]"
INVALID_MESSAGE = (
    "Error: invalid width value. Use integer with px, rem, or em (e.g., 100px or 5rem)"
)


def _spacer(width: str) -> str:
    return (
        f'<div style="width:calc({width} - (2 * var(--wtbe-cell-padding-x, 24px)));'
        'height:0;" aria-hidden="true"></div>'
    )


class TestValidWidth:
    def test_bare_number_means_pixels(self) -> None:
        html = placeholder.handle({"width": "150"})
        assert "calc(150px - (2 * var(--wtbe-cell-padding-x, 24px)))" in html
        assert html == _spacer("150px")

    def test_rem(self) -> None:
        html = placeholder.handle({"width": "5rem"})
        assert "calc(5rem - (2 * var(--wtbe-cell-padding-x, 24px)))" in html

    @pytest.mark.parametrize(
        "width,expected",
        [
            ("300px", "300px"),
            ("2.5em", "2.5em"),
            ("12.75", "12.75px"),
            ("  200px ", "200px"),
        ],
    )
    def test_accepted_widths(self, width, expected) -> None:
        assert placeholder.handle({"width": width}) == _spacer(expected)

    def test_spacer_is_hidden(self) -> None:
        div = BeautifulSoup(placeholder.handle({"width": "10"}), "html.parser").div
        assert div["aria-hidden"] == "true"
        assert div.get_text() == ""

    def test_enclosed_content_is_ignored(self) -> None:
        assert placeholder.handle({"width": "10"}, "<b>ignored</b>") == _spacer("10px")


class TestErrors:
    @pytest.mark.parametrize("atts", [{}, {"width": ""}, {"width": "   "}, {"width": None}])
    def test_missing_width(self, atts) -> None:
        html = placeholder.handle(atts)
        div = BeautifulSoup(html, "html.parser").div
        assert div.get_text() == REQUIRED_MESSAGE
        assert div["style"] == ERROR_STYLE
        assert div["class"] == [ERROR_CLASS]

    def test_message_brackets_are_character_references(self) -> None:
        html = placeholder.handle({})
        assert "[" not in html
        assert "&#91;wtbe_placeholder&#93;" in html

    @pytest.mark.parametrize(
        "width", ["50%", "10vw", "-5", "abc", "1e3", "5 px", "px", ".5rem", "10PX", "100px;color:red"]
    )
    def test_invalid_width(self, width) -> None:
        div = BeautifulSoup(placeholder.handle({"width": width}), "html.parser").div
        assert div.get_text() == INVALID_MESSAGE
        assert "background-color:#ffb6b6" in div["style"]


def test_sanitize_width() -> None:
    assert sanitize_width("10") == "10px"
    assert sanitize_width("1.5rem") == "1.5rem"
    assert sanitize_width("50%") is None


def test_calculate_width_uses_padding_variable() -> None:
    assert calculate_width("1em") == f"calc(1em - (2 * var({PADDING_VAR}, {PADDING_FALLBACK})))"
