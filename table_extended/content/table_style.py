# table_extended/content/table_style.py
"""
Postprocessor that applies the fixed layout rule to saved table markup.

The table block saves its ``className`` on the wrapping figure and its fixed
layout flag as ``has-fixed-layout`` on the table:

    <figure class="wp-block-table wtbe-cell-min-width">
        <table class="has-fixed-layout">...</table>
    </figure>

Content saved before fixed layout was switched on can still carry
``wtbe-cell-min-width``. The two options conflict, so the token is dropped
from such figures; every other class is kept in order.
"""

from bs4 import BeautifulSoup

from table_extended import style_state

from .utils import soup_to_html

FIXED_LAYOUT_CLASS = "has-fixed-layout"
TABLE_BLOCK_CLASS = "wp-block-table"


def _class_list(tag) -> list:
    classes = tag.get("class", [])
    if isinstance(classes, str):
        classes = classes.split()
    return classes


def table_style(html: str, context: dict) -> str:
    """
    Remove the min-width token from fixed layout tables.

    Args:
        html: HTML string to process
        context: Context dictionary (unused but required for postprocessor signature)

    Returns:
        Processed HTML
    """
    if style_state.CELL_MIN_WIDTH not in html:
        return html

    soup = BeautifulSoup(html, "html.parser")

    for figure in soup.find_all("figure", class_=TABLE_BLOCK_CLASS):
        table = figure.find("table")
        if table is None:
            continue

        has_fixed_layout = FIXED_LAYOUT_CLASS in _class_list(table)
        class_name = " ".join(_class_list(figure))
        healed = style_state.reconcile_fixed_layout(class_name, has_fixed_layout)

        if healed != class_name:
            figure["class"] = healed.split()

    return soup_to_html(soup)


def table_style_default(html: str, context: dict) -> str:
    """
    Default configuration for table_style.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return table_style(html, context)
