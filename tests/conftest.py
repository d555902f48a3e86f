import pytest

from binderpages.models import failure as failure_module
from binderpages.models.card import CardRecord


@pytest.fixture(autouse=True)
def clear_finalized_responses():
    """Clear the finalized responses set between tests.

    This prevents test isolation issues where Python reuses memory
    addresses for new objects, causing id() collisions with previously
    finalized responses.
    """
    failure_module._finalized_responses.clear()
    yield
    failure_module._finalized_responses.clear()


def make_card(collector_number: str, rarity: str | None = "common", name: str | None = None):
    return CardRecord(
        name=name or f"Card {collector_number}",
        rarity=rarity,
        collector_number=collector_number,
    )


@pytest.fixture
def sample_cards() -> list[CardRecord]:
    """Six cards: 3 mythic, 2 rare, 1 without rarity, in shuffled order."""
    return [
        make_card("10", "mythic", "Sheoldred, the Apocalypse"),
        make_card("2", "mythic", "Liliana of the Veil"),
        make_card("1", "rare", "Lightning Bolt"),
        make_card("7", "mythic", "Ajani, Sleeper Agent"),
        make_card("3", "rare", "Monastery Swiftspear"),
        make_card("5", None, "Mystery Card"),
    ]
