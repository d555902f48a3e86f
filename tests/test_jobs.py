import json
import logging
from pathlib import Path

import pytest

from binderpages.jobs.render_binder import main, render_binder


@pytest.fixture
def cards_path() -> Path:
    return Path(__file__).parent / "fixtures" / "scryfall_cards.json"


class TestRenderBinder:
    def test_writes_print_sheet(self, cards_path: Path, tmp_path: Path) -> None:
        output = tmp_path / "out" / "dmu.html"

        pages = render_binder(cards_path, output, title="DMU")

        assert pages == 1
        html = output.read_text(encoding="utf-8")
        assert "<title>DMU</title>" in html
        assert html.count('class="binder-card') == 4

    def test_applies_config_file(self, cards_path: Path, tmp_path: Path) -> None:
        config_path = tmp_path / "layout.json"
        config_path.write_text(
            json.dumps({"grid": {"columns": 1, "rows": 1}, "rarity_counts": {"mythic": 3}})
        )
        output = tmp_path / "dmu.html"

        pages = render_binder(cards_path, output, config_path=config_path)

        # 3 copies of the mythic plus 3 other cards, one per page
        assert pages == 6

    def test_equal_margins_override_config_file(self, cards_path: Path, tmp_path: Path) -> None:
        config_path = tmp_path / "layout.json"
        config_path.write_text(json.dumps({"margins": {"top": 0.16, "left": 0.5}}))
        output = tmp_path / "dmu.html"

        render_binder(cards_path, output, config_path=config_path, equal_margins=True)

        assert "margin-right: 0.0in;" in output.read_text(encoding="utf-8")

    def test_empty_card_file_warns(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        cards = tmp_path / "empty.json"
        cards.write_text("[]")

        with caplog.at_level(logging.WARNING):
            pages = render_binder(cards, tmp_path / "empty.html")

        assert pages == 0
        assert "No cards to display" in caplog.text


class TestMain:
    def test_default_output_next_to_cards(self, cards_path: Path, tmp_path: Path) -> None:
        cards = tmp_path / "dmu.json"
        cards.write_text(cards_path.read_text(encoding="utf-8"), encoding="utf-8")

        assert main([str(cards)]) == 0
        assert (tmp_path / "dmu.html").exists()

    def test_missing_file_exits_nonzero(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "missing.json")]) == 1

    def test_invalid_json_exits_nonzero(self, tmp_path: Path) -> None:
        cards = tmp_path / "broken.json"
        cards.write_text("{not json")

        assert main([str(cards)]) == 1

    def test_malformed_card_exits_nonzero(self, tmp_path: Path) -> None:
        cards = tmp_path / "bad.json"
        cards.write_text(json.dumps([{"name": "No Number"}]))

        assert main([str(cards)]) == 1

    def test_undecodable_cards_file_exits_nonzero(self, tmp_path: Path) -> None:
        cards = tmp_path / "latin1.json"
        cards.write_bytes(b'[{"name": "\xff\xfe", "collector_number": "1"}]')

        assert main([str(cards)]) == 1

    def test_undecodable_config_file_exits_nonzero(
        self, cards_path: Path, tmp_path: Path
    ) -> None:
        config = tmp_path / "layout.json"
        config.write_bytes(b"\xff")

        assert main([str(cards_path), "--config", str(config)]) == 1

    def test_equal_margins_flag(self, cards_path: Path, tmp_path: Path) -> None:
        config = tmp_path / "layout.json"
        config.write_text(json.dumps({"margins": {"top": 0.16, "left": 0.5}}))
        output = tmp_path / "dmu.html"

        args = [str(cards_path), "--config", str(config), "--output", str(output)]
        assert main([*args, "--equal-margins"]) == 0

        html = output.read_text(encoding="utf-8")
        assert "margin-left: 0.0in; margin-top: 0.0in; margin-right: 0.0in;" in html
