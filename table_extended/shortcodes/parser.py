# table_extended/shortcodes/parser.py
"""
Shortcode text syntax, compatible with WordPress content.

Recognised forms:
    [tag]                      leaf
    [tag attr="value" /]       self-closing
    [tag attr=value]...[/tag]  enclosing (body passed as content)
    [[tag]]                    escaped, rendered literally as [tag]

Attribute values may use double quotes, single quotes or no quotes.
Attribute names are lower-cased; bare values are kept under integer keys.
"""

import re

_ATTR_RE = re.compile(
    r"""([\w-]+)\s*=\s*"([^"]*)"(?:\s|$)"""
    r"""|([\w-]+)\s*=\s*'([^']*)'(?:\s|$)"""
    r"""|([\w-]+)\s*=\s*([^\s'"]+)(?:\s|$)"""
    r"""|"([^"]*)"(?:\s|$)"""
    r"""|'([^']*)'(?:\s|$)"""
    r"""|(\S+)(?:\s|$)"""
)

_SPACE_LIKE_RE = re.compile("[\u00a0\u200b]+")
_CLOSED_HTML_RE = re.compile(r"^[^<]*(?:<[^>]*>[^<]*)*$")


def get_shortcode_regex(tags, enclosing: bool = True) -> re.Pattern:
    """
    Build the pattern matching any of ``tags``.

    Looking for a body means scanning ahead for the closing tag, which costs a
    pass over the rest of the text per match. With ``enclosing=False`` only a
    closing tag written right after the opening one is consumed, so callers can
    skip the scan for text without any ``[/``.

    Groups:
        1: extra opening bracket for [[escaped]] shortcodes
        2: tag name
        3: raw attribute text
        4: "/" for self-closing tags
        5: enclosed content
        6: extra closing bracket for [[escaped]] shortcodes
    """
    tag_regex = "|".join(re.escape(tag) for tag in sorted(tags, key=len, reverse=True))
    body = r"([^\[]*(?:\[(?!/\2\])[^\[]*)*)" if enclosing else r"()"
    return re.compile(
        r"\[(\[?)"
        rf"({tag_regex})"
        r"(?![\w-])"
        r"([^\]/]*(?:/(?!\])[^\]/]*)*?)"
        r"(?:"
        r"(/)\]"
        r"|\]"
        rf"(?:{body}\[/\2\])?"
        r")"
        r"(\]?)"
    )


def parse_atts(text: str) -> dict:
    """
    Parse the attribute part of a shortcode tag.

    >>> parse_atts('url="https://example.com" newtab=false')
    {'url': 'https://example.com', 'newtab': 'false'}
    """
    atts = {}
    text = _SPACE_LIKE_RE.sub(" ", text or "")
    position = 0

    for match in _ATTR_RE.finditer(text):
        if match.group(1):
            atts[match.group(1).lower()] = match.group(2)
        elif match.group(3):
            atts[match.group(3).lower()] = match.group(4)
        elif match.group(5):
            atts[match.group(5).lower()] = match.group(6)
        elif match.group(7) is not None:
            atts[position] = match.group(7)
            position += 1
        elif match.group(8) is not None:
            atts[position] = match.group(8)
            position += 1
        elif match.group(9):
            atts[position] = match.group(9)
            position += 1

    # Values with an unclosed HTML element are dropped
    for key, value in atts.items():
        if isinstance(value, str) and "<" in value and not _CLOSED_HTML_RE.match(value):
            atts[key] = ""

    return atts
