from binderpages.rendering.print_sheet import (
    rarity_label,
    render_card_cell,
    render_print_sheet,
    render_stylesheet,
)

__all__ = [
    "rarity_label",
    "render_card_cell",
    "render_print_sheet",
    "render_stylesheet",
]
