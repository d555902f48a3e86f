"""
Print sheet renderer.

Emits a standalone HTML document for a BinderLayout: a stylesheet sized
from the layout geometry and one cell per placement. Browsers print it
on US Letter with one binder page per sheet.
"""

from html import escape

from binderpages.config import PAPER_HEIGHT_IN, PAPER_WIDTH_IN, RARITY_LABELS
from binderpages.models.card import CardRecord
from binderpages.models.layout import (
    EMPTY_LAYOUT_MESSAGE,
    BinderLayout,
    CellClass,
    GeometryResult,
    PlacedCard,
)

CUT_LINE = "1px dotted #888"

BASE_STYLESHEET = f"""
@page {{ size: {PAPER_WIDTH_IN}in {PAPER_HEIGHT_IN}in; margin: 0; }}
* {{ box-sizing: border-box; }}
body {{ margin: 0; font-family: sans-serif; }}
.binder-grid {{ display: grid; grid-template-columns: repeat(var(--columns), auto); }}
.binder-card {{ display: flex; flex-direction: column; justify-content: space-between; overflow: hidden; }}
.binder-card .card-name {{ font-weight: bold; font-size: 9pt; }}
.binder-card .card-rarity, .binder-card .card-number {{ font-size: 8pt; }}
.page-break {{ break-after: page; }}
.empty-layout {{ padding: 2em; text-align: center; }}
"""


def rarity_label(card: CardRecord) -> str:
    """Short label for a card's rarity; unmapped rarities use their initial."""
    if not card.rarity:
        return "?"
    return RARITY_LABELS.get(card.rarity.lower(), card.rarity[0].upper())


def _inches(value: float) -> str:
    return f"{value}in"


def _column_rule(geometry: GeometryResult, cell_class: CellClass) -> str:
    pad = _inches(geometry.padding_lr)
    left = "0" if cell_class is CellClass.FIRST else pad
    right = "0" if cell_class is CellClass.LAST else pad
    border = "" if cell_class is CellClass.LAST else f" border-right: {CUT_LINE};"
    return (
        f".{cell_class.value}-column {{ width: {_inches(geometry.column_widths[cell_class])}; "
        f"padding-left: {left}; padding-right: {right};{border} }}"
    )


def _row_rule(geometry: GeometryResult, cell_class: CellClass) -> str:
    pad = _inches(geometry.padding_tb)
    top = "0" if cell_class is CellClass.FIRST else pad
    bottom = "0" if cell_class is CellClass.LAST else pad
    border = "" if cell_class is CellClass.LAST else f" border-bottom: {CUT_LINE};"
    return (
        f".{cell_class.value}-row {{ height: {_inches(geometry.row_heights[cell_class])}; "
        f"padding-top: {top}; padding-bottom: {bottom};{border} }}"
    )


def render_stylesheet(geometry: GeometryResult) -> str:
    """
    Stylesheet rules sized from the layout geometry.

    The grid box is the printable width, pushed off the page edges by the
    shims; each column/row class gets its width/height and inner padding.
    """
    rules = [
        ".binder-grid { "
        f"width: {_inches(geometry.printable_width)}; "
        f"margin-left: {_inches(geometry.shim_left)}; "
        f"margin-top: {_inches(geometry.shim_top)}; "
        f"margin-right: {_inches(geometry.shim_right)}; "
        f"margin-bottom: {_inches(geometry.shim_bottom)}; }}"
    ]
    rules.extend(_column_rule(geometry, cell_class) for cell_class in CellClass)
    rules.extend(_row_rule(geometry, cell_class) for cell_class in CellClass)
    return "\n".join(rules)


def cell_classes(placed: PlacedCard) -> str:
    classes = [
        "binder-card",
        f"{placed.column_class.value}-column",
        f"{placed.row_class.value}-row",
    ]
    if placed.page_break:
        classes.append("page-break")
    return " ".join(classes)


def render_card_cell(placed: PlacedCard) -> str:
    card = placed.card
    return (
        f'<div class="{cell_classes(placed)}">'
        f'<div class="card-name">{escape(card.name)}</div>'
        f'<div class="card-rarity">{escape(rarity_label(card))}</div>'
        f'<div class="card-number">{escape(card.collector_number)}</div>'
        "</div>"
    )


def render_print_sheet(layout: BinderLayout, title: str = "Binder Pages") -> str:
    """
    Render a complete printable HTML document.

    Args:
        layout: Result of ``build_binder_layout``
        title: Document title, usually the set code and name

    Returns:
        HTML document; an empty layout renders a "No cards to display." notice
    """
    if layout.is_empty:
        body = f'<div class="empty-layout">{escape(EMPTY_LAYOUT_MESSAGE)}</div>'
    else:
        cells = "\n".join(render_card_cell(placed) for placed in layout.placements)
        body = (
            f'<div class="binder-grid" style="--columns: {layout.config.grid.columns}">\n'
            f"{cells}\n"
            "</div>"
        )

    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escape(title)}</title>\n"
        f"<style>{BASE_STYLESHEET}\n{render_stylesheet(layout.geometry)}\n</style>\n"
        "</head>\n"
        "<body>\n"
        f"{body}\n"
        "</body>\n"
        "</html>\n"
    )
