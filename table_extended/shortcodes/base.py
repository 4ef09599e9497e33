# table_extended/shortcodes/base.py
"""
Shared pieces for shortcode renderers.

A shortcode is a plain ``Shortcode`` value: a tag name, a default attribute
map and a render function. ``Shortcode.handle`` does the common work
(defaulting, the ``shortcode_atts`` filter) before calling the renderer, so
renderers only map a complete attribute dict to an HTML string.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from django.utils.encoding import iri_to_uri
from django.utils.html import escape, format_html
from django.utils.safestring import SafeString, mark_safe

from table_extended import hooks
from table_extended.conf import get_table_extended_config

TRUE_VALUES = {"1", "true", "yes", "on"}

_PERCENT_OCTET_RE = re.compile(r"%[a-fA-F0-9][a-fA-F0-9]")
_CLASS_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_-]")

# Control characters and the encoded CR/LF/NUL family WordPress strips
_URL_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]|%0[0-9a-fA-F]")
_URL_SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.-]*):")
_PHP_FILE_RE = re.compile(r"^[a-z0-9-]+?\.php", re.IGNORECASE)


@dataclass(frozen=True)
class Shortcode:
    """A shortcode definition."""

    tag: str
    defaults: Mapping[str, Any]
    render: Callable[[dict, str], str]
    description: str = ""

    def handle(self, atts: Any = None, content: str | None = None) -> str:
        """
        Render the shortcode for one occurrence.

        Args:
            atts: Parsed attributes; anything that is not a mapping counts as
                no attributes
            content: Enclosed body, ignored by leaf shortcodes

        Returns:
            Rendered HTML
        """
        if not isinstance(atts, Mapping):
            atts = {}
        content = content or ""

        parsed = shortcode_atts(self.defaults, atts)
        parsed = hooks.shortcode_atts.apply(parsed, self.tag, content)

        return self.render(parsed, content)


def shortcode_atts(defaults: Mapping[str, Any], atts: Mapping[Any, Any]) -> dict:
    """Keep only known attributes, filling the missing ones from ``defaults``."""
    return {name: atts.get(name, default) for name, default in defaults.items()}


def to_bool(value: Any) -> bool:
    """
    Permissive boolean parsing for attribute values.

    "1", "true", "yes" and "on" (any case) are true, everything else is false.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in TRUE_VALUES


def sanitize_html_class(value: Any, fallback: str = "") -> str:
    """Strip a single class name down to ``[A-Za-z0-9_-]``."""
    sanitized = _PERCENT_OCTET_RE.sub("", str(value))
    sanitized = _CLASS_UNSAFE_RE.sub("", sanitized)
    return sanitized or fallback


def sanitize_class_list(classes) -> list[str]:
    """Split each entry on whitespace and sanitize token by token."""
    result = []
    for entry in classes:
        for token in str(entry).split():
            cleaned = sanitize_html_class(token)
            if cleaned:
                result.append(cleaned)
    return result


def esc_url(url: Any, protocols=None) -> str:
    """
    Clean a URL for use in an ``href``.

    Returns an empty string when the URL is blank or uses a scheme outside
    ``protocols`` (defaults to the configured ALLOWED_PROTOCOLS). Scheme-less
    host names get ``http://``; unsafe characters are percent-encoded. The
    result still needs attribute escaping.
    """
    url = str(url if url is not None else "").strip()
    if not url:
        return ""

    if protocols is None:
        protocols = get_table_extended_config()["ALLOWED_PROTOCOLS"]

    url = url.replace(" ", "%20")
    # Removing one sequence can join the halves of another, e.g. %0%0aa
    stripped = None
    while stripped != url:
        stripped = url
        url = _URL_CONTROL_RE.sub("", url)
    url = url.replace(";//", "://")

    if (
        ":" not in url
        and not url.startswith(("/", "#", "?"))
        and not _PHP_FILE_RE.match(url)
    ):
        url = f"http://{url}"

    match = _URL_SCHEME_RE.match(url)
    if match and match.group(1).lower() not in {p.lower() for p in protocols}:
        return ""

    return iri_to_uri(url)


def build_attributes(attributes: Mapping[str, Any]) -> SafeString:
    """
    Serialize an ordered attribute map.

    None and False drop the attribute, True renders it bare, anything else
    renders as ``name="escaped value"``. Order is preserved.
    """
    parts = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(str(escape(name)))
            continue
        parts.append(str(format_html('{}="{}"', name, value)))
    return mark_safe(" ".join(parts))
