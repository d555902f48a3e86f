"""
Layout engine entry point.

Pure function of its inputs: no I/O and no state kept between calls.
Callers re-invoke it whenever the configuration changes.
"""

import logging
from collections.abc import Sequence

from binderpages.layout.geometry import compute_geometry
from binderpages.layout.grid import assign_grid
from binderpages.layout.sequence import build_sequence
from binderpages.models.card import CardRecord
from binderpages.models.layout import BinderLayout, LayoutConfig

logger = logging.getLogger(__name__)


def build_binder_layout(
    cards: Sequence[CardRecord] | None,
    config: LayoutConfig,
) -> BinderLayout:
    """
    Lay out a card list as binder pages.

    Args:
        cards: Card records for one set. None or an empty list produces an
            empty layout (``is_empty``), not an error.
        config: Normalized layout configuration

    Returns:
        BinderLayout with placements in binder order and the page geometry
    """
    geometry = compute_geometry(config.margins, config.grid)
    sequence = build_sequence(cards, config.rarity_counts)
    placements = tuple(assign_grid(sequence, config.grid))

    layout = BinderLayout(config=config, geometry=geometry, placements=placements)

    logger.debug(
        "Laid out %d placements on %d pages (%dx%d)",
        len(placements),
        layout.page_count,
        config.grid.columns,
        config.grid.rows,
    )

    return layout
