"""
Layout configuration normalizer.

Turns loosely-typed user input (form values, JSON, query strings) into a
LayoutConfig. Nothing here raises: every bad value falls back to its
default or is clamped into range, so a layout can always be rendered.
"""

import logging
import math
import re
from collections.abc import Mapping
from typing import Any

from binderpages.config import (
    DEFAULT_GRID_SIZE,
    DEFAULT_MARGIN_IN,
    DEFAULT_RARITY_COUNT,
    DEFAULT_RARITY_COUNTS,
    MAX_GRID_SIZE,
    MIN_GRID_SIZE,
)
from binderpages.models.layout import GridSize, LayoutConfig, Margins

logger = logging.getLogger(__name__)

MARGIN_SIDES = ("top", "right", "bottom", "left")

# Leading integer of a string, e.g. "3" in " 3.5in"
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_float(value: Any) -> float | None:
    """Finite float value of ``value``, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return result if math.isfinite(result) else None


def parse_int(value: Any) -> int | None:
    """
    Integer value of ``value``, or None.

    Finite floats are truncated. Strings use their leading integer, so
    "3.5" is 3 and "abc" is None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None


def parse_margin(value: Any) -> float:
    """Margin in inches; negative or unparseable values use the default."""
    margin = parse_float(value)
    if margin is None or margin < 0:
        if value is not None:
            logger.debug("Invalid margin %r, using %s", value, DEFAULT_MARGIN_IN)
        return DEFAULT_MARGIN_IN
    return margin


def clamp_grid_dimension(value: Any) -> int:
    """Columns or rows clamped to [1, 8]; unparseable values use 4."""
    parsed = parse_int(value)
    if parsed is None:
        if value is not None:
            logger.debug("Invalid grid dimension %r, using %d", value, DEFAULT_GRID_SIZE)
        return DEFAULT_GRID_SIZE
    return max(MIN_GRID_SIZE, min(MAX_GRID_SIZE, parsed))


def parse_rarity_count(value: Any) -> int:
    """Duplicate count; anything below 1 or unparseable becomes 1."""
    parsed = parse_int(value)
    if parsed is None or parsed < 1:
        logger.debug("Invalid rarity count %r, using %d", value, DEFAULT_RARITY_COUNT)
        return DEFAULT_RARITY_COUNT
    return parsed


def parse_margins(raw: Any) -> Margins:
    if not isinstance(raw, Mapping):
        return Margins()
    return Margins(**{side: parse_margin(raw.get(side)) for side in MARGIN_SIDES})


def parse_grid(raw: Any) -> GridSize:
    if not isinstance(raw, Mapping):
        return GridSize()
    return GridSize(
        columns=clamp_grid_dimension(raw.get("columns")),
        rows=clamp_grid_dimension(raw.get("rows")),
    )


def parse_rarity_counts(raw: Any) -> dict[str, int]:
    """
    Rarity duplicate counts merged over the defaults.

    Keys are lower-cased so they match ``CardRecord.rarity_key``.
    """
    counts = dict(DEFAULT_RARITY_COUNTS)
    if not isinstance(raw, Mapping):
        return counts
    for rarity, value in raw.items():
        counts[str(rarity).lower()] = parse_rarity_count(value)
    return counts


def parse_layout_config(raw: Mapping[str, Any] | None) -> LayoutConfig:
    """
    Build a LayoutConfig from a plain configuration mapping.

    Recognized keys: ``margins`` ({top, right, bottom, left}),
    ``rarity_counts`` (or ``rarityCounts``), ``grid`` ({columns, rows}) and
    ``equal_margins`` (or ``equalMargins``). With ``equal_margins: true`` the
    top margin is used on all four sides. Omitted keys take their defaults;
    unknown keys are ignored.

    Args:
        raw: Configuration mapping, or None for all defaults

    Returns:
        Normalized LayoutConfig
    """
    if not isinstance(raw, Mapping):
        return LayoutConfig()

    rarity_raw = raw.get("rarity_counts", raw.get("rarityCounts"))

    config = LayoutConfig(
        margins=parse_margins(raw.get("margins")),
        rarity_counts=parse_rarity_counts(rarity_raw),
        grid=parse_grid(raw.get("grid")),
    )
    if raw.get("equal_margins", raw.get("equalMargins")) is True:
        return config.with_equal_margins()
    return config
