# table_extended/shortcodes/registry.py

from __future__ import annotations

import logging
import re

from django.core.exceptions import ImproperlyConfigured
from django.utils.html import escape
from django.utils.module_loading import import_string

from table_extended import hooks

from .base import Shortcode
from .parser import get_shortcode_regex, parse_atts

logger = logging.getLogger(__name__)


def load_shortcodes(paths) -> list[Shortcode]:
    """
    Import Shortcode definitions from dotted paths.

    Raises:
        ImproperlyConfigured: if a path cannot be imported or does not point
            at a Shortcode
    """
    definitions = []
    for path in paths:
        try:
            definition = import_string(path)
        except ImportError as e:
            raise ImproperlyConfigured(
                f"TABLE_EXTENDED['SHORTCODES'] entry {path!r} could not be imported: {e}"
            ) from e
        if not isinstance(definition, Shortcode):
            raise ImproperlyConfigured(
                f"TABLE_EXTENDED['SHORTCODES'] entry {path!r} is not a Shortcode"
            )
        definitions.append(definition)
    return definitions


class ShortcodeRegistry:
    """Tag name to Shortcode mapping, plus expansion of shortcodes in text."""

    def __init__(self, definitions=()):
        self._shortcodes: dict[str, Shortcode] = {}
        self._pattern: re.Pattern | None = None
        self._leaf_pattern: re.Pattern | None = None
        for definition in definitions:
            self.register(definition)

    @classmethod
    def from_config(cls, config: dict) -> "ShortcodeRegistry":
        """Build the registry from the app configuration and the ``shortcodes`` filter."""
        definitions = load_shortcodes(config["SHORTCODES"])
        definitions = hooks.shortcodes.apply(definitions)
        return cls(definitions)

    def register(self, shortcode: Shortcode) -> None:
        if shortcode.tag in self._shortcodes:
            logger.warning(f"Shortcode [{shortcode.tag}] registered twice, replacing it")
        self._shortcodes[shortcode.tag] = shortcode
        self._pattern = self._leaf_pattern = None
        logger.debug(f"Registered shortcode [{shortcode.tag}]")

    def unregister(self, tag: str) -> bool:
        removed = self._shortcodes.pop(tag, None) is not None
        if removed:
            self._pattern = self._leaf_pattern = None
        return removed

    def get(self, tag: str) -> Shortcode | None:
        return self._shortcodes.get(tag)

    @property
    def tags(self) -> list[str]:
        return list(self._shortcodes)

    def __contains__(self, tag) -> bool:
        return tag in self._shortcodes

    def __len__(self) -> int:
        return len(self._shortcodes)

    def __iter__(self):
        return iter(self._shortcodes.values())

    @property
    def pattern(self) -> re.Pattern:
        if self._pattern is None:
            self._pattern = get_shortcode_regex(self._shortcodes)
        return self._pattern

    @property
    def leaf_pattern(self) -> re.Pattern:
        """Like ``pattern``, without looking ahead for enclosed bodies."""
        if self._leaf_pattern is None:
            self._leaf_pattern = get_shortcode_regex(self._shortcodes, enclosing=False)
        return self._leaf_pattern

    def pattern_for(self, content: str) -> re.Pattern:
        """The cheapest pattern that still finds every shortcode in ``content``."""
        return self.pattern if "[/" in content else self.leaf_pattern

    def render(self, tag: str, atts=None, content: str | None = None) -> str:
        """
        Render one registered shortcode.

        Raises:
            KeyError: if ``tag`` is not registered
        """
        return self._shortcodes[tag].handle(atts, content)

    def do_shortcode(self, content: str, escape_text: bool = False) -> str:
        """
        Replace every registered shortcode in ``content`` with its output.

        Unknown tags are left as written. With ``escape_text`` the literal
        text around the shortcodes is HTML-escaped, which is what callers
        working on decoded text nodes need.
        """
        literal = escape if escape_text else str

        if "[" not in content or not self._shortcodes:
            return literal(content)

        pieces = []
        last = 0
        for match in self.pattern_for(content).finditer(content):
            pieces.append(literal(content[last:match.start()]))
            pieces.append(self._render_match(match, literal))
            last = match.end()
        pieces.append(literal(content[last:]))

        return "".join(pieces)

    def _render_match(self, match: re.Match, literal) -> str:
        # [[tag]] renders as the literal [tag]
        if match.group(1) == "[" and match.group(6) == "]":
            return literal(match.group(0)[1:-1])

        tag = match.group(2)
        atts = parse_atts(match.group(3))
        output = self.render(tag, atts, match.group(5))

        return f"{match.group(1)}{output}{match.group(6)}"


def get_shortcode_registry() -> ShortcodeRegistry:
    """The registry built by the app config at startup."""
    from django.apps import apps

    return apps.get_app_config("table_extended").shortcodes
