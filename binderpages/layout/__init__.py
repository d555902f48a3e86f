"""
Binder layout engine.

Sequence building, page geometry and grid assignment.
"""

from binderpages.layout.engine import build_binder_layout
from binderpages.layout.geometry import compute_geometry
from binderpages.layout.grid import assign_grid, place_card
from binderpages.layout.sequence import (
    build_sequence,
    compare_collector_numbers,
    expand_by_rarity,
    parse_collector_number,
)

__all__ = [
    "assign_grid",
    "build_binder_layout",
    "build_sequence",
    "compare_collector_numbers",
    "compute_geometry",
    "expand_by_rarity",
    "parse_collector_number",
    "place_card",
]
