# table_extended/style_state.py
"""
Style state stored as CSS class tokens on the table block.

The host editor gives the table block a single free-form ``className``
string. Every table style option is persisted inside that string as a
recognised ``wtbe-*`` token:

    wtbe-header-bg-<color>   header background (dark, light, success, warning)
    wtbe-no-borders          remove the outer border
    wtbe-cell-min-width      minimum cell width (conflicts with fixed layout)
    wtbe-freeze-first-col    sticky first column
    wtbe-header-text-center  centered header text

Tokens the theme or the user added are never touched: every write removes or
appends one known token and keeps the rest of the string in order.
"""

from __future__ import annotations

from dataclasses import dataclass

HEADER_BG_PREFIX = "wtbe-header-bg-"
NO_BORDERS = "wtbe-no-borders"
CELL_MIN_WIDTH = "wtbe-cell-min-width"
FREEZE_FIRST_COL = "wtbe-freeze-first-col"
HEADER_TEXT_CENTER = "wtbe-header-text-center"

# "" is the primary (default) header color and has no token.
HEADER_COLORS = ("", "dark", "light", "success", "warning")

TOGGLE_TOKENS = {
    "no_borders": NO_BORDERS,
    "cell_min_width": CELL_MIN_WIDTH,
    "freeze_first_column": FREEZE_FIRST_COL,
    "center_header_text": HEADER_TEXT_CENTER,
}


@dataclass(frozen=True)
class StyleState:
    """Parsed view over a block's ``className``."""

    header_background_color: str = ""
    no_borders: bool = False
    cell_min_width: bool = False
    freeze_first_column: bool = False
    center_header_text: bool = False


def split_tokens(class_name: str | None) -> list[str]:
    """Split a class string on whitespace, dropping empty tokens."""
    if not class_name:
        return []
    return class_name.split()


def decode(class_name: str | None, has_fixed_layout: bool = False) -> StyleState:
    """
    Read the style state out of a class string.

    Never fails: unknown tokens are ignored and an unrecognised header color
    suffix reads as the primary color. With ``has_fixed_layout`` set,
    ``cell_min_width`` is always reported as off.

    Args:
        class_name: The block's ``className`` attribute (may be None)
        has_fixed_layout: The host's ``hasFixedLayout`` attribute

    Returns:
        StyleState for the string
    """
    tokens = split_tokens(class_name)
    present = set(tokens)

    header_color = ""
    for token in tokens:
        if token.startswith(HEADER_BG_PREFIX):
            suffix = token[len(HEADER_BG_PREFIX):]
            header_color = suffix if suffix in HEADER_COLORS else ""
            break

    return StyleState(
        header_background_color=header_color,
        no_borders=NO_BORDERS in present,
        cell_min_width=CELL_MIN_WIDTH in present and not has_fixed_layout,
        freeze_first_column=FREEZE_FIRST_COL in present,
        center_header_text=HEADER_TEXT_CENTER in present,
    )


def encode(current_class_name: str | None, token: str, enabled: bool) -> str:
    """
    Switch one class token on or off.

    Whole-word occurrences of ``token`` are removed; when ``enabled`` the
    token is appended once at the end. Other tokens keep their order.

    >>> encode("is-style-x wtbe-no-borders", "wtbe-no-borders", False)
    'is-style-x'
    """
    tokens = [t for t in split_tokens(current_class_name) if t != token]
    if enabled:
        tokens.append(token)
    return " ".join(tokens)


def set_header_color(current_class_name: str | None, value: str | None) -> str:
    """
    Replace the header background token.

    Every ``wtbe-header-bg-*`` token is dropped; a non-empty ``value`` adds
    ``wtbe-header-bg-<value>``. The value is not validated here.
    """
    tokens = [
        t for t in split_tokens(current_class_name) if not t.startswith(HEADER_BG_PREFIX)
    ]
    if value:
        tokens.append(f"{HEADER_BG_PREFIX}{value}")
    return " ".join(tokens)


def reconcile_fixed_layout(class_name: str | None, has_fixed_layout: bool) -> str:
    """
    Drop ``wtbe-cell-min-width`` when the table uses a fixed layout.

    Both options fight over column widths, so fixed layout wins whenever the
    stored string still carries the min-width token.
    """
    if has_fixed_layout:
        return encode(class_name, CELL_MIN_WIDTH, False)
    return class_name or ""


def style_classes(state: StyleState) -> list[str]:
    """Tokens that represent ``state``, in canonical order."""
    classes = []
    if state.header_background_color:
        classes.append(f"{HEADER_BG_PREFIX}{state.header_background_color}")
    for field_name, token in TOGGLE_TOKENS.items():
        if getattr(state, field_name):
            classes.append(token)
    return classes
