"""
Card sequence builder.

Expands card records by their rarity duplicate count and sorts the result
into binder order by collector number.
"""

import logging
import re
from collections.abc import Mapping, Sequence
from functools import cmp_to_key

from binderpages.config import DEFAULT_RARITY_COUNT
from binderpages.models.card import CardRecord

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_collector_number(value: str) -> int | None:
    """
    Integer value of a collector number, or None for forms like "142a".

    Only ASCII digits with an optional sign count. Whitespace, underscores
    and non-ASCII digits leave the number in string form.
    """
    if not isinstance(value, str) or not _INTEGER.fullmatch(value):
        return None
    return int(value)


def compare_collector_numbers(a: CardRecord, b: CardRecord) -> int:
    """
    Order two cards by collector number.

    Numeric when both numbers parse as integers, otherwise a plain string
    comparison of the raw values. Mixed pairs such as "4" and "4a" always
    take the string branch.
    """
    na = parse_collector_number(a.collector_number)
    nb = parse_collector_number(b.collector_number)
    if na is not None and nb is not None:
        return (na > nb) - (na < nb)
    sa, sb = a.collector_number, b.collector_number
    return (sa > sb) - (sa < sb)


def expand_by_rarity(
    cards: Sequence[CardRecord],
    rarity_counts: Mapping[str, int],
) -> list[CardRecord]:
    """
    Repeat each card by the duplicate count of its rarity.

    Copies of a card are contiguous and cards keep their input order.
    Rarities missing from ``rarity_counts`` get one copy.
    """
    expanded: list[CardRecord] = []
    for card in cards:
        count = rarity_counts.get(card.rarity_key, DEFAULT_RARITY_COUNT)
        expanded.extend([card] * count)
    return expanded


def build_sequence(
    cards: Sequence[CardRecord] | None,
    rarity_counts: Mapping[str, int],
) -> list[CardRecord]:
    """
    Build the working card sequence for a binder.

    Args:
        cards: Card records for one set; None or a non-sequence yields []
        rarity_counts: Duplicate count per rarity key

    Returns:
        Expanded cards sorted by collector number
    """
    if not isinstance(cards, (list, tuple)):
        if cards is not None:
            logger.debug("Ignoring card input of type %s", type(cards).__name__)
        return []

    expanded = expand_by_rarity(cards, rarity_counts)
    logger.debug("Expanded %d cards to %d placements", len(cards), len(expanded))

    return sorted(expanded, key=cmp_to_key(compare_collector_numbers))
