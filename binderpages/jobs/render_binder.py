"""
Render a binder print sheet from a saved Scryfall card payload.

Usage:
    python -m binderpages.jobs.render_binder cards.json --config layout.json --output dmu.html
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from binderpages.layout import build_binder_layout
from binderpages.models.failure import KnownError
from binderpages.parsers.layout_config import parse_layout_config
from binderpages.parsers.scryfall import load_card_file
from binderpages.rendering.print_sheet import render_print_sheet

logger = logging.getLogger(__name__)


def load_config_file(path: Path | None) -> dict[str, Any] | None:
    """Read a layout configuration JSON file; None means all defaults."""
    if path is None:
        return None
    with open(path, encoding="utf-8") as f:
        data: dict[str, Any] = json.load(f)
    return data


def render_binder(
    cards_path: Path,
    output_path: Path,
    config_path: Path | None = None,
    title: str | None = None,
    equal_margins: bool = False,
) -> int:
    """
    Lay out a card file and write the HTML print sheet.

    Args:
        equal_margins: Use the top margin on all four sides

    Returns:
        Number of binder pages written
    """
    cards = load_card_file(cards_path)
    config = parse_layout_config(load_config_file(config_path))
    if equal_margins:
        config = config.with_equal_margins()
    layout = build_binder_layout(cards, config)

    if layout.is_empty:
        logger.warning("No cards to display in %s", cards_path)

    html = render_print_sheet(layout, title=title or cards_path.stem)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")

    logger.info(
        "Wrote %d placements on %d pages to %s",
        len(layout.placements),
        layout.page_count,
        output_path,
    )
    return layout.page_count


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Render a binder print sheet")
    parser.add_argument(
        "cards",
        type=Path,
        help="Scryfall card JSON (a card list or a list object with 'data')",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Layout configuration JSON (margins, rarity_counts, grid)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Where to write the HTML (default: <cards>.html)",
    )
    parser.add_argument(
        "--title",
        default=None,
        help="Document title (default: cards file name)",
    )
    parser.add_argument(
        "--equal-margins",
        action="store_true",
        help="Apply the top margin to all four sides",
    )

    args = parser.parse_args(argv)
    output = args.output or args.cards.with_suffix(".html")

    try:
        render_binder(
            args.cards,
            output,
            config_path=args.config,
            title=args.title,
            equal_margins=args.equal_margins,
        )
    except (OSError, ValueError) as e:
        logger.error("Could not read input: %s", e)
        return 1
    except KnownError as e:
        logger.error("Invalid card data: %s (%s)", e.message, e.detail)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
