"""
Page geometry calculator.

Derives the grid box and cell sizes for a binder page on US Letter paper.

The larger margin of each opposing pair becomes the "visual" margin, so the
printed page looks symmetric even when the printer's raw margins are not.
The difference is absorbed by a shim on the side with the smaller raw
margin, which moves the grid box without changing any cell size.

Between two cards the gap is one full visual margin, split as half a margin
of padding on each card. Edge cells only pad their inner side.
"""

from binderpages.config import PAPER_HEIGHT_IN, PAPER_WIDTH_IN, SEAM_EPSILON_IN
from binderpages.models.layout import CellClass, GeometryResult, GridSize, Margins


def _axis_sizes(base: float, padding: float) -> dict[CellClass, float]:
    return {
        CellClass.FIRST: base + padding,
        CellClass.MIDDLE: base + 2 * padding,
        CellClass.LAST: base + padding,
    }


def compute_geometry(margins: Margins, grid: GridSize) -> GeometryResult:
    """
    Compute page geometry for normalized margins and grid size.

    Args:
        margins: Raw printer margins in inches, all >= 0
        grid: Columns and rows per page, each in [1, 8]

    Returns:
        GeometryResult with printable box, shims, paddings and the
        per-class column widths and row heights
    """
    printable_width = PAPER_WIDTH_IN - margins.left - margins.right + SEAM_EPSILON_IN
    printable_height = PAPER_HEIGHT_IN - margins.top - margins.bottom + SEAM_EPSILON_IN

    visual_lr = max(margins.left, margins.right)
    visual_tb = max(margins.top, margins.bottom)

    # Only the side with the smaller raw margin gets a shim
    shim_left = max(0.0, margins.right - margins.left)
    shim_right = max(0.0, margins.left - margins.right)
    shim_top = max(0.0, margins.bottom - margins.top)
    shim_bottom = max(0.0, margins.top - margins.bottom)

    usable_width = PAPER_WIDTH_IN - 2 * visual_lr
    usable_height = PAPER_HEIGHT_IN - 2 * visual_tb

    padding_lr = visual_lr / 2
    padding_tb = visual_tb / 2

    cell_width = (usable_width - 2 * (grid.columns - 1) * padding_lr) / grid.columns
    cell_height = (usable_height - 2 * (grid.rows - 1) * padding_tb) / grid.rows

    return GeometryResult(
        printable_width=printable_width,
        printable_height=printable_height,
        visual_margin_lr=visual_lr,
        visual_margin_tb=visual_tb,
        shim_left=shim_left,
        shim_right=shim_right,
        shim_top=shim_top,
        shim_bottom=shim_bottom,
        padding_lr=padding_lr,
        padding_tb=padding_tb,
        cell_width=cell_width,
        cell_height=cell_height,
        column_widths=_axis_sizes(cell_width, padding_lr),
        row_heights=_axis_sizes(cell_height, padding_tb),
    )
