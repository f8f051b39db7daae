"""Tests for catalog API endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from helicarrier.api.dependencies import get_loaded_catalog
from helicarrier.main import app
from helicarrier.services.catalog import Catalog


@pytest.fixture
async def client(catalog: Catalog):
    """Provide an async test client serving the sample catalog."""
    app.dependency_overrides[get_loaded_catalog] = lambda: catalog

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


class TestSearchProducts:
    async def test_no_body_returns_all(self, client: AsyncClient) -> None:
        response = await client.post("/products/search")

        assert response.status_code == 200
        assert [p["code"] for p in response.json()] == ["MC01en", "MC02en", "MC10en"]

    async def test_empty_filter_returns_all(self, client: AsyncClient) -> None:
        response = await client.post("/products/search", json={})

        assert response.status_code == 200
        assert len(response.json()) == 3

    async def test_filter_by_wave(self, client: AsyncClient) -> None:
        response = await client.post("/products/search", json={"wave": 2})

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["name"] == "The Rise of Red Skull"
        assert data[0]["release_date"] == "2020-09-25"
        assert data[0]["sets"] == []

    async def test_filter_by_set(self, client: AsyncClient) -> None:
        response = await client.post("/products/search", json={"sets": [{"name": "Rhino"}]})

        assert response.status_code == 200
        assert [p["code"] for p in response.json()] == ["MC01en"]

    async def test_unknown_filter_field_is_rejected(self, client: AsyncClient) -> None:
        response = await client.post("/products/search", json={"price": 40})

        assert response.status_code == 422


class TestGetProduct:
    async def test_found(self, client: AsyncClient) -> None:
        response = await client.get("/products/MC01en")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Core Set"
        assert data["type"] == "Core Set"
        assert {"name": "Rhino", "type": "Villain"} in data["sets"]

    async def test_not_found(self, client: AsyncClient) -> None:
        response = await client.get("/products/MC99en")

        assert response.status_code == 404
        assert "MC99en" in response.json()["detail"]


class TestSearchCards:
    async def test_no_body_returns_all(self, client: AsyncClient) -> None:
        response = await client.post("/cards/search")

        assert response.status_code == 200
        assert len(response.json()) == 3

    async def test_card_presentation(self, client: AsyncClient) -> None:
        response = await client.post(
            "/cards/search", json={"sides": [{"name": "Spider-Man"}]}
        )

        assert response.status_code == 200
        [card] = response.json()
        assert card["aspect"] is None

        [card_product] = card["products"]
        assert card_product["code"] == "MC01en"
        assert card_product["name"] == "Core Set"
        assert card_product["wave"] == 1
        assert card_product["sets"] == [
            {"name": "Spider-Man", "positions": [1], "type": "Hero Signature"}
        ]

        hero, alter_ego = card["sides"]
        assert hero["type"] == "Hero"
        assert hero["def"] == "3"
        assert hero["hit_points"] == "10"
        assert hero["cost"] is None
        assert alter_ego["name"] == "Peter Parker"
        assert alter_ego["rec"] == "3"
        assert alter_ego["atk"] is None

    async def test_scalar_tokens_in_filter(self, client: AsyncClient) -> None:
        response = await client.post(
            "/cards/search",
            json={"sides": [{"hit_points": "2:player:", "keywords": ["Hinder 1"]}]},
        )

        assert response.status_code == 200
        [card] = response.json()
        side = card["sides"][0]
        assert side["name"] == "Goblin Thrall"
        assert side["hit_points"] == "2 per Player"
        assert side["keywords"] == ["Stalwart", "Hinder 1"]

    async def test_explicit_null(self, client: AsyncClient) -> None:
        response = await client.post("/cards/search", json={"aspect": None})

        assert response.status_code == 200
        assert len(response.json()) == 2

    async def test_wave_through_product(self, client: AsyncClient) -> None:
        response = await client.post("/cards/search", json={"products": [{"wave": 2}]})

        assert response.status_code == 200
        assert response.json() == []

    async def test_set_name_narrows_listed_sets(self, client: AsyncClient) -> None:
        body = {"sides": [{"name": "Goblin Thrall"}]}

        kept = await client.post(
            "/cards/search", params={"set_name": "Goblin Gimmicks"}, json=body
        )
        dropped = await client.post("/cards/search", params={"set_name": "Rhino"}, json=body)

        assert kept.status_code == 200
        [kept_set] = kept.json()[0]["products"][0]["sets"]
        assert kept_set["name"] == "Goblin Gimmicks"
        assert dropped.status_code == 200
        assert dropped.json()[0]["products"][0]["sets"] == []

    async def test_set_name_keeps_absent_sets_absent(self, client: AsyncClient) -> None:
        response = await client.post(
            "/cards/search",
            params={"set_name": "Rhino"},
            json={"aspect": "Justice"},
        )

        assert response.status_code == 200
        [card] = response.json()
        assert card["products"][0]["sets"] is None

    async def test_bad_token_is_rejected(self, client: AsyncClient) -> None:
        response = await client.post("/cards/search", json={"sides": [{"atk": "lots"}]})

        assert response.status_code == 422


class TestCatalogNotLoaded:
    async def test_search_returns_503(self) -> None:
        """Queries are refused until the catalog is loaded."""
        app.dependency_overrides[get_loaded_catalog] = lambda: None

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.post("/cards/search")

        app.dependency_overrides.clear()

        assert response.status_code == 503
