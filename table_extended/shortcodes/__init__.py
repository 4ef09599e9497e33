# table_extended/shortcodes/__init__.py

from .base import Shortcode, build_attributes, esc_url, sanitize_html_class, to_bool
from .cta import cta
from .parser import parse_atts
from .placeholder import placeholder
from .registry import ShortcodeRegistry, get_shortcode_registry, load_shortcodes

__all__ = [
    "Shortcode",
    "ShortcodeRegistry",
    "build_attributes",
    "cta",
    "esc_url",
    "get_shortcode_registry",
    "load_shortcodes",
    "parse_atts",
    "placeholder",
    "sanitize_html_class",
    "to_bool",
]
