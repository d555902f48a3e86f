from binderpages.parsers.layout_config import (
    clamp_grid_dimension,
    parse_layout_config,
    parse_margin,
    parse_rarity_count,
)
from binderpages.parsers.scryfall import (
    CardSource,
    load_card_file,
    parse_card_list,
    parse_card_record,
)

__all__ = [
    "CardSource",
    "clamp_grid_dimension",
    "load_card_file",
    "parse_card_list",
    "parse_card_record",
    "parse_layout_config",
    "parse_margin",
    "parse_rarity_count",
]
