# table_extended/content/__init__.py

from .shortcode_expander import shortcode_expander_default
from .table_style import table_style_default

POSTPROCESSORS = [
    table_style_default,  # Normalize table style tokens (fixed layout vs. min width)
    shortcode_expander_default,  # Replace [wtbe_*] shortcodes with their HTML
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context=None):
    """Apply all postprocessors in order"""
    context = context if context is not None else {}
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
