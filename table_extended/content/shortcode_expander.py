# table_extended/content/shortcode_expander.py
"""
Postprocessor that expands shortcodes in rendered HTML.

This postprocessor:
- Scans text nodes for registered shortcodes ([wtbe_cta], [wtbe_placeholder])
- Replaces each occurrence with the shortcode's HTML fragment
- Leaves text inside code, pre, script, style and textarea untouched
- Leaves text inside rendered shortcode error markers untouched
- Never looks inside attribute values

Expected structure:
    Input:
        <figure class="wp-block-table">
            <table>
                <tr><td>Pro plan [wtbe_cta url="/pricing" label="Buy"]</td></tr>
            </table>
        </figure>

    Output:
        <figure class="wp-block-table">
            <table>
                <tr><td>Pro plan <a href="/pricing" class="wtbe-cta" target="_blank" rel="noopener noreferrer">Buy</a></td></tr>
            </table>
        </figure>
"""

import logging

from bs4 import BeautifulSoup, NavigableString

from table_extended.conf import get_table_extended_config
from table_extended.shortcodes import get_shortcode_registry

from .utils import soup_to_html

logger = logging.getLogger(__name__)


def _in_skipped_element(node: NavigableString, skip_tags: set, skip_classes: set) -> bool:
    for parent in node.parents:
        if parent.name in skip_tags:
            return True
        if skip_classes.intersection(parent.get("class") or ()):
            return True
    return False


def shortcode_expander(html: str, context: dict, registry=None) -> str:
    """
    Expand shortcodes inside text nodes.

    Args:
        html: HTML string to process
        context: Context dictionary; ``context["shortcodes"]`` may hold a
            registry to use instead of the app's
        registry: Explicit ShortcodeRegistry, wins over the context

    Returns:
        Processed HTML
    """
    if "[" not in html:
        return html

    if registry is None:
        registry = context.get("shortcodes")
    if registry is None:
        registry = get_shortcode_registry()
    if not len(registry):
        return html

    config = get_table_extended_config()
    skip_tags = set(config["SKIP_TAGS"])
    skip_classes = set(config["SKIP_CLASSES"])
    soup = BeautifulSoup(html, "html.parser")

    expanded = 0
    for node in list(soup.find_all(string=True)):
        # Comments, CDATA and doctypes are NavigableString subclasses
        if type(node) is not NavigableString or "[" not in node:
            continue
        if _in_skipped_element(node, skip_tags, skip_classes):
            continue

        text = str(node)
        if not registry.pattern_for(text).search(text):
            continue

        fragment = BeautifulSoup(registry.do_shortcode(text, escape_text=True), "html.parser")
        replacements = list(fragment.contents)
        if replacements:
            node.replace_with(*replacements)
        else:
            node.extract()
        expanded += 1

    if expanded:
        logger.debug(f"Expanded shortcodes in {expanded} text node(s)")

    return soup_to_html(soup)


def shortcode_expander_default(html: str, context: dict) -> str:
    """
    Default configuration for shortcode_expander.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return shortcode_expander(html, context)
