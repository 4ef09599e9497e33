# table_extended/editor.py
"""
Block editor binding for the table style options.

The host editor calls two filters:

- ``blocks.registerBlockType`` with each block's settings. For the table
  block we add the ``headerBackgroundColor`` attribute and drop the
  ``stripes`` style variation (striping is part of the default look).
- ``editor.BlockEdit`` with the host's edit component. We wrap it so the
  table block also gets a "Table Style Options" inspector panel; every other
  block renders exactly what the host supplied.

The panel is returned as plain dataclasses (PanelBody, SelectControl,
ToggleControl) carrying labels, current values and ``on_change`` callbacks.
Every callback writes the block attributes through ``props.set_attributes``
once per interaction.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from django.utils.translation import gettext_lazy as _

from . import style_state
from .style_state import StyleState

logger = logging.getLogger(__name__)

TABLE_BLOCK = "core/table"

HEADER_COLOR_OPTIONS = [
    (_("Primary (Blue)"), ""),
    (_("Dark (Black)"), "dark"),
    (_("Light (Gray)"), "light"),
    (_("Success (Green)"), "success"),
    (_("Warning (Orange)"), "warning"),
]


@dataclass
class BlockProps:
    """What the host passes to an edit component."""

    name: str
    attributes: dict
    set_attributes: Callable[[dict], Any]
    extra: dict = field(default_factory=dict)


@dataclass
class SelectOption:
    label: str
    value: str


@dataclass
class SelectControl:
    label: str
    value: str
    options: list[SelectOption]
    on_change: Callable[[str], None]
    help: str = ""


@dataclass
class ToggleControl:
    label: str
    checked: bool
    on_change: Callable[[bool], None]
    help: str = ""


@dataclass
class PanelBody:
    title: str
    children: list
    initial_open: bool = True


@dataclass
class InspectorControls:
    children: list


@dataclass
class Fragment:
    children: list


def add_table_block_attributes(settings: dict, name: str | None = None) -> dict:
    """
    ``blocks.registerBlockType`` filter.

    Args:
        settings: Block settings as registered by the host
        name: Block name, when the host passes it separately

    Returns:
        Settings for the table block with the extra attribute and without
        the stripes style; any other block's settings unchanged
    """
    block_name = name or settings.get("name")
    if block_name != TABLE_BLOCK:
        return settings

    settings = dict(settings)
    settings["attributes"] = {
        **settings.get("attributes", {}),
        "headerBackgroundColor": {
            "type": "string",
            "default": "primary",
        },
    }

    if settings.get("styles"):
        settings["styles"] = [
            style for style in settings["styles"] if style.get("name") != "stripes"
        ]

    return settings


class TableStyleControls:
    """Reads the style state of one table block and writes changes back."""

    def __init__(self, props: BlockProps):
        self.props = props

    @property
    def class_name(self) -> str:
        return (self.props.attributes.get("className") or "").strip()

    @property
    def has_fixed_layout(self) -> bool:
        return bool(self.props.attributes.get("hasFixedLayout"))

    def heal(self) -> None:
        """Clear a stale min-width token when fixed layout is on."""
        healed = style_state.reconcile_fixed_layout(self.class_name, self.has_fixed_layout)
        if healed != self.class_name:
            logger.debug("Removing cell min width from a fixed layout table")
            self.props.set_attributes({"className": healed})

    def state(self) -> StyleState:
        return style_state.decode(self.class_name, self.has_fixed_layout)

    def toggle_class(self, checked: bool, token: str) -> None:
        self.props.set_attributes(
            {"className": style_state.encode(self.class_name, token, checked)}
        )

    def change_header_color(self, value: str) -> None:
        self.props.set_attributes(
            {"className": style_state.set_header_color(self.class_name, value)}
        )

    def toggle_cell_min_width(self, checked: bool) -> None:
        """Min width and fixed layout exclude each other, so turning it on clears fixed layout."""
        attributes = {
            "className": style_state.encode(
                self.class_name, style_state.CELL_MIN_WIDTH, checked
            )
        }
        if checked:
            attributes["hasFixedLayout"] = False
        self.props.set_attributes(attributes)

    def panel(self) -> PanelBody:
        self.heal()
        state = self.state()

        return PanelBody(
            title=_("Table Style Options"),
            initial_open=True,
            children=[
                SelectControl(
                    label=_("Header Background Color"),
                    value=state.header_background_color,
                    options=[
                        SelectOption(label=label, value=value)
                        for label, value in HEADER_COLOR_OPTIONS
                    ],
                    on_change=self.change_header_color,
                    help=_("Choose the background color for table header cells"),
                ),
                ToggleControl(
                    label=_("Remove Table Borders"),
                    checked=state.no_borders,
                    on_change=lambda checked: self.toggle_class(
                        checked, style_state.NO_BORDERS
                    ),
                    help=_("Remove the outer border from the table"),
                ),
                ToggleControl(
                    label=_("Minimum Cell Width (150px)"),
                    checked=state.cell_min_width,
                    on_change=self.toggle_cell_min_width,
                    help=_(
                        "Set a minimum width for all cells. Disabled when Fixed Width is on."
                    ),
                ),
                ToggleControl(
                    label=_("Freeze First Column"),
                    checked=state.freeze_first_column,
                    on_change=lambda checked: self.toggle_class(
                        checked, style_state.FREEZE_FIRST_COL
                    ),
                    help=_("Keep the first column visible when scrolling horizontally"),
                ),
                ToggleControl(
                    label=_("Center Header Text"),
                    checked=state.center_header_text,
                    on_change=lambda checked: self.toggle_class(
                        checked, style_state.HEADER_TEXT_CENTER
                    ),
                    help=_("Center align text in header cells"),
                ),
            ],
        )


def table_block_edit(block_edit: Callable[[BlockProps], Any], props: BlockProps):
    """Render the host's edit UI, plus the style panel for table blocks."""
    if props.name != TABLE_BLOCK:
        return block_edit(props)

    return Fragment(
        children=[
            block_edit(props),
            InspectorControls(children=[TableStyleControls(props).panel()]),
        ]
    )


def with_table_style_controls(block_edit: Callable[[BlockProps], Any]):
    """``editor.BlockEdit`` filter: wrap the host edit component."""

    def edit(props: BlockProps):
        return table_block_edit(block_edit, props)

    return edit


EDITOR_FILTERS = [
    ("blocks.registerBlockType", "wtbe/add-table-attributes", add_table_block_attributes),
    ("editor.BlockEdit", "wtbe/table-inspector-controls", with_table_style_controls),
]


def register_editor_filters(add_filter: Callable[[str, str, Callable], Any]) -> None:
    """Hand the editor filters to the host's ``add_filter(hook, namespace, callback)``."""
    for hook_name, namespace, callback in EDITOR_FILTERS:
        add_filter(hook_name, namespace, callback)
