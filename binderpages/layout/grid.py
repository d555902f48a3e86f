"""
Grid assigner.

Places a card sequence onto binder pages of ``columns`` x ``rows`` cells,
left to right, top to bottom.
"""

from collections.abc import Sequence

from binderpages.models.card import CardRecord
from binderpages.models.layout import CellClass, GridSize, PlacedCard


def place_card(card: CardRecord, index: int, grid: GridSize) -> PlacedCard:
    """
    Place the card at ``index`` of the sequence.

    Depends only on the index and the grid, so any slice of a sequence can
    be placed independently.
    """
    cards_per_page = grid.cards_per_page
    column = index % grid.columns
    row = (index // grid.columns) % grid.rows

    return PlacedCard(
        card=card,
        index=index,
        page=index // cards_per_page,
        row=row,
        column=column,
        row_class=CellClass.classify(row, grid.rows),
        column_class=CellClass.classify(column, grid.columns),
        page_break=(index + 1) % cards_per_page == 0,
    )


def assign_grid(sequence: Sequence[CardRecord], grid: GridSize) -> list[PlacedCard]:
    """
    Assign every card in the sequence to a grid cell.

    Returns one PlacedCard per sequence element, in sequence order.
    """
    return [place_card(card, index, grid) for index, card in enumerate(sequence)]
