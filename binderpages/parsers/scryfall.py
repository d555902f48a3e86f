"""
Scryfall card payload parser.

Converts Scryfall card objects into CardRecords. Fetching and caching the
payloads is done by a card source outside this package; ``CardSource``
describes the interface such a source provides.

Card objects: https://scryfall.com/docs/api/cards
"""

import json
import logging
from pathlib import Path
from typing import Any, Protocol

from binderpages.models.card import CardRecord
from binderpages.models.failure import FailureKind, KnownError

logger = logging.getLogger(__name__)

# Card sources treat their cached payloads as fresh for this long
CACHE_MAX_AGE_DAYS = 7


class CardSource(Protocol):
    """
    Read-through cache over the Scryfall API.

    Both calls serve cached data younger than CACHE_MAX_AGE_DAYS unless
    ``force`` is set.
    """

    async def fetch_set_list(self, force: bool = False) -> list[dict[str, Any]]: ...

    async def fetch_cards_for_set(
        self, set_code: str, force: bool = False
    ) -> list[dict[str, Any]]: ...


def _required_text(raw: dict[str, Any], key: str) -> str:
    value = raw.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise KnownError(
            kind=FailureKind.INVALID_INPUT,
            message=f"Card object is missing '{key}'",
            detail=f"Card: {raw.get('name') or raw.get('id') or '<unnamed>'}",
            suggestion="Send Scryfall card objects with name and collector_number.",
        )
    return str(value)


def parse_card_record(raw: dict[str, Any]) -> CardRecord:
    """
    Parse one Scryfall card object.

    Args:
        raw: Scryfall card JSON object

    Returns:
        CardRecord with name, rarity, collector number and set code

    Raises:
        KnownError: If the object is not a mapping or lacks a name or
            collector number
    """
    if not isinstance(raw, dict):
        raise KnownError(
            kind=FailureKind.INVALID_INPUT,
            message="Card entries must be JSON objects",
            detail=f"Got {type(raw).__name__}",
        )

    rarity = raw.get("rarity")

    return CardRecord(
        name=_required_text(raw, "name"),
        rarity=str(rarity) if rarity else None,
        collector_number=_required_text(raw, "collector_number"),
        set_code=raw.get("set"),
    )


def parse_card_list(payload: Any) -> list[CardRecord]:
    """
    Parse a card list payload.

    Accepts a bare list of card objects or a Scryfall list object
    (``{"object": "list", "data": [...]}``). Any other payload, including
    None, yields an empty list.

    Raises:
        KnownError: If any card object is malformed
    """
    if isinstance(payload, dict):
        payload = payload.get("data")

    if not isinstance(payload, list):
        if payload is not None:
            logger.debug("Card payload of type %s has no cards", type(payload).__name__)
        return []

    return [parse_card_record(raw) for raw in payload]


def load_card_file(path: Path) -> list[CardRecord]:
    """
    Load card records from a saved Scryfall JSON payload.

    Args:
        path: JSON file with a card list or a Scryfall list object

    Returns:
        Parsed card records

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file is not valid JSON
        KnownError: If any card object is malformed
    """
    with open(path, encoding="utf-8") as f:
        payload = json.load(f)

    cards = parse_card_list(payload)
    logger.info("Loaded %d cards from %s", len(cards), path)
    return cards
