# table_extended/templatetags/table_extended_tags.py

from django import template
from django.utils.safestring import mark_safe

from table_extended import style_state
from table_extended.content import apply_postprocessors
from table_extended.shortcodes import get_shortcode_registry

register = template.Library()

"""
Template tags for table content.

Usage in templates:
1. Load the tags: {% load table_extended_tags %}

2. Expand shortcodes in stored content:
    {{ post.body|shortcodes }}

3. Render a shortcode directly:
    {% wtbe_cta url="https://example.com" label="Learn More" nofollow="true" %}
    {% wtbe_placeholder width="300px" %}

4. Read the style options of a table block:
    {% with state=block.className|table_style_state %}{{ state.header_background_color }}{% endwith %}
"""


@register.filter(name="shortcodes")
def shortcodes_filter(value):
    """Run stored HTML through the content postprocessors."""
    return mark_safe(apply_postprocessors(str(value or "")))


@register.filter(name="table_style_state")
def table_style_state_filter(value, has_fixed_layout=False):
    return style_state.decode(value, bool(has_fixed_layout))


@register.simple_tag
def wtbe_cta(**kwargs):
    return mark_safe(get_shortcode_registry().render("wtbe_cta", kwargs))


@register.simple_tag
def wtbe_placeholder(width=""):
    return mark_safe(get_shortcode_registry().render("wtbe_placeholder", {"width": width}))
