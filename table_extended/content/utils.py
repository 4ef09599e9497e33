"""Utilities shared by the content postprocessors."""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter


class SourceOrderFormatter(HTMLFormatter):
    """The "minimal" formatter, but attributes keep the order they were written in."""

    def __init__(self):
        super().__init__(entity_substitution=EntitySubstitution.substitute_xml)

    def attributes(self, tag):
        if not tag.attrs:
            return []
        return list(tag.attrs.items())


SOURCE_ORDER = SourceOrderFormatter()


def soup_to_html(soup: BeautifulSoup) -> str:
    """Serialise ``soup`` back to HTML without reordering attributes."""
    return soup.decode(formatter=SOURCE_ORDER)
