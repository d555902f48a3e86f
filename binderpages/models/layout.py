"""
Layout value types.

Everything here is immutable and recomputed on every layout run.
Measurements are in inches.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum

from binderpages.config import (
    DEFAULT_GRID_SIZE,
    DEFAULT_MARGIN_IN,
    DEFAULT_RARITY_COUNTS,
)
from binderpages.models.card import CardRecord

EMPTY_LAYOUT_MESSAGE = "No cards to display."


class CellClass(str, Enum):
    """Position of a cell along one grid axis."""

    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"

    @classmethod
    def classify(cls, position: int, count: int) -> "CellClass":
        """
        Classify a 0-based position on an axis of ``count`` cells.

        The first position wins when the axis has a single cell.
        """
        if position == 0:
            return cls.FIRST
        if position == count - 1:
            return cls.LAST
        return cls.MIDDLE


@dataclass(frozen=True, slots=True)
class Margins:
    """Raw printer margins for each side of the page."""

    top: float = DEFAULT_MARGIN_IN
    right: float = DEFAULT_MARGIN_IN
    bottom: float = DEFAULT_MARGIN_IN
    left: float = DEFAULT_MARGIN_IN

    @classmethod
    def equal(cls, value: float) -> "Margins":
        return cls(top=value, right=value, bottom=value, left=value)

    def equalized(self) -> "Margins":
        """Copy the top margin to every side."""
        return Margins.equal(self.top)


@dataclass(frozen=True, slots=True)
class GridSize:
    """Cells per binder page."""

    columns: int = DEFAULT_GRID_SIZE
    rows: int = DEFAULT_GRID_SIZE

    @property
    def cards_per_page(self) -> int:
        return self.rows * self.columns


@dataclass(frozen=True)
class LayoutConfig:
    """
    Complete configuration snapshot for one layout run.

    Values are expected to be normalized already; see
    ``binderpages.parsers.layout_config.parse_layout_config``.
    """

    margins: Margins = field(default_factory=Margins)
    rarity_counts: Mapping[str, int] = field(default_factory=lambda: dict(DEFAULT_RARITY_COUNTS))
    grid: GridSize = field(default_factory=GridSize)

    def with_equal_margins(self) -> "LayoutConfig":
        return replace(self, margins=self.margins.equalized())


@dataclass(frozen=True, slots=True)
class CellSize:
    width: float
    height: float


@dataclass(frozen=True)
class GeometryResult:
    """
    Physical page geometry derived from margins and grid size.

    The grid box is ``printable_width`` x ``printable_height`` and is offset
    inside the page by the four shims. Cells are sized per ``CellClass`` on
    each axis: edge cells carry one padding allowance, middle cells two.
    """

    printable_width: float
    printable_height: float
    visual_margin_lr: float
    visual_margin_tb: float
    shim_left: float
    shim_right: float
    shim_top: float
    shim_bottom: float
    padding_lr: float
    padding_tb: float
    cell_width: float
    cell_height: float
    column_widths: Mapping[CellClass, float]
    row_heights: Mapping[CellClass, float]

    def cell_size(self, row_class: CellClass, column_class: CellClass) -> CellSize:
        return CellSize(
            width=self.column_widths[column_class],
            height=self.row_heights[row_class],
        )


@dataclass(frozen=True, slots=True)
class PlacedCard:
    """
    A card assigned to a grid cell.

    Attributes:
        card: The placed card record
        index: Position in the expanded, sorted sequence (0-based)
        page: Binder page the card lands on (0-based)
        row: Row on its page (0-based)
        column: Column on its page (0-based)
        row_class: Edge/middle classification of the row
        column_class: Edge/middle classification of the column
        page_break: True for the last card on a full page
    """

    card: CardRecord
    index: int
    page: int
    row: int
    column: int
    row_class: CellClass
    column_class: CellClass
    page_break: bool


@dataclass(frozen=True)
class BinderLayout:
    """Result of a layout run: ordered placements plus the shared geometry."""

    config: LayoutConfig
    geometry: GeometryResult
    placements: tuple[PlacedCard, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.placements

    @property
    def page_count(self) -> int:
        if not self.placements:
            return 0
        return self.placements[-1].page + 1

    def cell_size(self, placed: PlacedCard) -> CellSize:
        return self.geometry.cell_size(placed.row_class, placed.column_class)
