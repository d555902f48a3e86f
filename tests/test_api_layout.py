"""Tests for the layout endpoints."""

import pytest
from fastapi.testclient import TestClient

from binderpages.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def _scryfall_cards(count: int, rarity: str = "common") -> list[dict[str, str]]:
    return [
        {"name": f"Card {n}", "rarity": rarity, "collector_number": str(n), "set": "dmu"}
        for n in range(count, 0, -1)
    ]


class TestCreateLayout:
    def test_success_envelope(self, client: TestClient) -> None:
        response = client.post("/layout", json={"cards": _scryfall_cards(17)})

        assert response.status_code == 200
        body = response.json()
        assert body["outcome"] == "success"
        assert body["failure"] is None

        data = body["data"]
        assert data["columns"] == 4
        assert data["rows"] == 4
        assert data["cards_per_page"] == 16
        assert data["page_count"] == 2
        assert len(data["placements"]) == 17

    def test_placements_are_sorted_and_classified(self, client: TestClient) -> None:
        response = client.post("/layout", json={"cards": _scryfall_cards(17)})
        placements = response.json()["data"]["placements"]

        assert [p["collector_number"] for p in placements[:3]] == ["1", "2", "3"]
        assert placements[9]["collector_number"] == "10"
        assert placements[15]["page_break"] is True
        assert placements[16]["page_break"] is False
        assert placements[16]["page"] == 1
        assert placements[16]["row_class"] == "first"
        assert placements[16]["column_class"] == "first"

    def test_geometry_in_payload(self, client: TestClient) -> None:
        response = client.post(
            "/layout",
            json={
                "cards": _scryfall_cards(2),
                "config": {"margins": {"top": 0.16, "right": 0.16, "bottom": 0.16, "left": 0.5}},
            },
        )
        geometry = response.json()["data"]["geometry"]

        assert geometry["shim_left"] == 0
        assert geometry["shim_right"] == pytest.approx(0.34)
        assert set(geometry["column_widths"]) == {"first", "middle", "last"}

    def test_equal_margins_use_top_on_every_side(self, client: TestClient) -> None:
        response = client.post(
            "/layout",
            json={
                "cards": _scryfall_cards(2),
                "config": {"margins": {"top": 0.3, "left": 0.5}, "equal_margins": True},
            },
        )
        geometry = response.json()["data"]["geometry"]

        assert geometry["visual_margin_lr"] == pytest.approx(0.3)
        assert geometry["visual_margin_tb"] == pytest.approx(0.3)
        assert geometry["shim_left"] == 0
        assert geometry["shim_right"] == 0

    def test_cell_size_on_placement(self, client: TestClient) -> None:
        response = client.post(
            "/layout",
            json={"cards": _scryfall_cards(3), "config": {"grid": {"columns": 3, "rows": 1}}},
        )
        data = response.json()["data"]
        middle = data["placements"][1]

        assert middle["column_class"] == "middle"
        assert middle["width"] == data["geometry"]["column_widths"]["middle"]

    def test_config_is_clamped(self, client: TestClient) -> None:
        response = client.post(
            "/layout",
            json={"cards": _scryfall_cards(1), "config": {"grid": {"columns": 0, "rows": 100}}},
        )
        data = response.json()["data"]

        assert data["columns"] == 1
        assert data["rows"] == 8

    def test_rarity_counts_expand(self, client: TestClient) -> None:
        response = client.post(
            "/layout",
            json={"cards": _scryfall_cards(3, "mythic"), "config": {"rarity_counts": {"mythic": 4}}},
        )

        assert len(response.json()["data"]["placements"]) == 12

    def test_accepts_scryfall_list_object(self, client: TestClient) -> None:
        response = client.post(
            "/layout",
            json={"cards": {"object": "list", "data": _scryfall_cards(2)}},
        )

        assert response.json()["outcome"] == "success"


class TestCreateLayoutFailures:
    def test_empty_cards_is_known_failure(self, client: TestClient) -> None:
        response = client.post("/layout", json={"cards": []})

        body = response.json()
        assert body["outcome"] == "known_failure"
        assert body["data"] is None
        assert body["failure"]["kind"] == "empty_result"
        assert body["failure"]["detail"] == "No cards to display."

    def test_missing_cards_is_known_failure(self, client: TestClient) -> None:
        response = client.post("/layout", json={})

        assert response.json()["failure"]["kind"] == "empty_result"

    def test_malformed_card_is_invalid_input(self, client: TestClient) -> None:
        response = client.post("/layout", json={"cards": [{"name": "Lightning Bolt"}]})

        assert response.status_code == 400
        body = response.json()
        assert body["outcome"] == "known_failure"
        assert body["failure"]["kind"] == "invalid_input"


class TestCreatePrintSheet:
    def test_returns_html(self, client: TestClient) -> None:
        response = client.post(
            "/layout/print",
            json={"cards": _scryfall_cards(5), "title": "DMU - Dominaria United"},
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<title>DMU - Dominaria United</title>" in response.text
        assert response.text.count('class="binder-card') == 5

    def test_empty_cards_render_notice(self, client: TestClient) -> None:
        response = client.post("/layout/print", json={"cards": []})

        assert response.status_code == 200
        assert "No cards to display." in response.text

    def test_malformed_card_returns_envelope(self, client: TestClient) -> None:
        response = client.post("/layout/print", json={"cards": [{"collector_number": "1"}]})

        assert response.status_code == 400
        assert response.json()["failure"]["kind"] == "invalid_input"
