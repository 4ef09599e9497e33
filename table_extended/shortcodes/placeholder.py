# table_extended/shortcodes/placeholder.py
"""
Invisible spacer that forces a table cell to a minimum width.

Usage:
    [wtbe_placeholder width="300px"]

Output:
    <div style="width:calc(300px - (2 * var(--wtbe-cell-padding-x, 24px)));height:0;" aria-hidden="true"></div>

The requested width is the outer cell width, so twice the horizontal cell
padding is subtracted. PADDING_FALLBACK must match the value the stylesheet
declares for --wtbe-cell-padding-x.

Only px, em and rem are accepted; a bare number means px. Percentages are
rejected because they resolve against the table, not the cell.
"""

import re

from django.utils.html import escape, format_html
from django.utils.safestring import mark_safe
from django.utils.translation import gettext as _

from .base import Shortcode

TAG = "wtbe_placeholder"
PADDING_VAR = "--wtbe-cell-padding-x"
PADDING_FALLBACK = "24px"

ERROR_STYLE = "background-color:#ffb6b6;font-style:italic;padding:4px;border-radius:2px;"
ERROR_CLASS = "wtbe-shortcode-error"

DEFAULTS = {
    "width": "",
}

_NUMERIC_RE = re.compile(r"^\d+(?:\.\d+)?$")
_DIMENSION_RE = re.compile(r"^(\d+(?:\.\d+)?)(px|em|rem)$")


def sanitize_width(width: str) -> str | None:
    """Return the width with its unit, or None when it is not allowed."""
    if _NUMERIC_RE.match(width):
        return f"{width}px"

    if _DIMENSION_RE.match(width):
        return width

    return None


def calculate_width(width: str) -> str:
    return f"calc({width} - (2 * var({PADDING_VAR}, {PADDING_FALLBACK})))"


def render_error(message: str) -> str:
    """
    Inline error marker shown in place of the spacer.

    Brackets are written as character references so the message never reads
    as a shortcode when the output is expanded again.
    """
    text = escape(message).replace("[", "&#91;").replace("]", "&#93;")
    return format_html(
        '<div class="{}" style="{}">{}</div>', ERROR_CLASS, ERROR_STYLE, mark_safe(text)
    )


def render_placeholder(atts: dict, content: str = "") -> str:
    width = str(atts["width"] or "").strip()

    if not width:
        return render_error(
            _("Error: width attribute is required for [wtbe_placeholder]")
        )

    sanitized_width = sanitize_width(width)
    if sanitized_width is None:
        return render_error(
            _(
                "Error: invalid width value. Use integer with px, rem, or em "
                "(e.g., 100px or 5rem)"
            )
        )

    return format_html(
        '<div style="width:{};height:0;" aria-hidden="true"></div>',
        calculate_width(sanitized_width),
    )


placeholder = Shortcode(
    tag=TAG,
    defaults=DEFAULTS,
    render=render_placeholder,
    description="Invisible spacer that forces a minimum cell width",
)
