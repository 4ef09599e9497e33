# table_extended/shortcodes/cta.py
"""
Call-to-action link for table cells.

Usage:
    [wtbe_cta url="https://example.com" label="Learn More" nofollow="true"]

Output (defaults):
    <a href="#" class="wtbe-cta" target="_blank" rel="noopener noreferrer">Click Here</a>
"""

from django.utils.html import format_html
from django.utils.translation import gettext_lazy as _

from table_extended import hooks

from .base import Shortcode, build_attributes, esc_url, sanitize_class_list, to_bool

TAG = "wtbe_cta"
DEFAULT_CLASS = "wtbe-cta"

DEFAULTS = {
    "url": "#",
    "label": _("Click Here"),
    "newtab": "true",
    "nofollow": "false",
    "sponsored": "false",
    "class": "",
    "id": "",
}


def build_class_string(additional_class: str) -> str:
    """``wtbe-cta`` plus the caller's classes, filtered and sanitized."""
    classes = [DEFAULT_CLASS]
    if additional_class:
        classes.append(additional_class)

    classes = hooks.cta_classes.apply(classes)

    return " ".join(sanitize_class_list(classes))


def build_rel_string(newtab: bool, nofollow: bool, sponsored: bool) -> str | None:
    """
    Build the ``rel`` value: nofollow, sponsored, then noopener noreferrer.

    Returns None when nothing applies so the attribute is left out.
    """
    rel_parts = []

    if nofollow:
        rel_parts.append("nofollow")

    if sponsored:
        rel_parts.append("sponsored")

    if newtab:
        rel_parts.extend(["noopener", "noreferrer"])

    rel_parts = hooks.cta_rel.apply(rel_parts, newtab, nofollow, sponsored)

    return " ".join(rel_parts) if rel_parts else None


def render_cta(atts: dict, content: str = "") -> str:
    """
    Render the CTA anchor.

    Always succeeds: a missing or rejected URL falls back to ``#``.
    """
    url = esc_url(atts["url"]) or "#"
    label = str(atts["label"])
    newtab = to_bool(atts["newtab"])
    nofollow = to_bool(atts["nofollow"])
    sponsored = to_bool(atts["sponsored"])
    css_class = str(atts["class"] or "").strip()
    element_id = str(atts["id"] or "").strip()

    attributes = {
        "href": url,
        "class": build_class_string(css_class) or None,
        "id": element_id or None,
        "target": "_blank" if newtab else None,
        "rel": build_rel_string(newtab, nofollow, sponsored),
    }

    return format_html("<a {}>{}</a>", build_attributes(attributes), label)


cta = Shortcode(
    tag=TAG,
    defaults=DEFAULTS,
    render=render_cta,
    description="Styled call-to-action link",
)
