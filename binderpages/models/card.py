from dataclasses import dataclass

from binderpages.config import UNKNOWN_RARITY


@dataclass(frozen=True, slots=True)
class CardRecord:
    """
    A single printing of a card as delivered by the card source.

    Attributes:
        name: Card name as printed
        rarity: Rarity key from the source (e.g., "mythic"), None if absent
        collector_number: Set-scoped collector number, e.g. "142" or "142a"
        set_code: Set code the printing belongs to (e.g., "DMU")
    """

    name: str
    rarity: str | None
    collector_number: str
    set_code: str | None = None

    @property
    def rarity_key(self) -> str:
        """Lower-cased rarity, or "unknown" when the record has none."""
        if not self.rarity:
            return UNKNOWN_RARITY
        return self.rarity.lower()
