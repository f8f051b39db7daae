from typing import Any

import pytest

from helicarrier.services.catalog import Catalog
from helicarrier.services.loader import parse_cards, parse_products


@pytest.fixture
def products_document() -> dict[str, Any]:
    """A small products document, as read from TOML."""
    return {
        "product": [
            {
                "name": "Core Set",
                "release_date": "2019-11-01",
                "type": "Core Set",
                "code": "MC01en",
                "wave": 1,
                "set": [
                    {"name": "Spider-Man", "type": "Hero Signature"},
                    {"name": "Rhino", "type": "Villain"},
                ],
            },
            {
                "name": "The Green Goblin",
                "release_date": "2019-12-20",
                "type": "Scenario Pack",
                "code": "MC02en",
                "wave": 1,
                "set": [{"name": "Goblin Gimmicks", "type": "Modular Encounter"}],
            },
            {
                "name": "The Rise of Red Skull",
                "release_date": "2020-09-25",
                "type": "Campaign Expansion",
                "code": "MC10en",
                "wave": 2,
            },
        ]
    }


@pytest.fixture
def cards_document() -> dict[str, Any]:
    """A small cards document, as read from TOML."""
    return {
        "card": [
            {
                "product": [
                    {
                        "code": "MC01en",
                        "positions": [1],
                        "set": [{"name": "Spider-Man", "positions": [1]}],
                    }
                ],
                "side": [
                    {
                        "name": "Spider-Man",
                        "type": "Hero",
                        "side": "A",
                        "unique": True,
                        "thw": 1,
                        "atk": 2,
                        "def": 3,
                        "hand_size": 5,
                        "hit_points": 10,
                        "traits": ["Avenger"],
                    },
                    {
                        "name": "Peter Parker",
                        "type": "Alter-Ego",
                        "side": "B",
                        "unique": True,
                        "rec": 3,
                        "hand_size": 6,
                        "hit_points": 10,
                        "traits": ["Genius"],
                    },
                ],
            },
            {
                "aspect": "Justice",
                "product": [{"code": "MC01en", "positions": [83, 84]}],
                "side": [
                    {
                        "name": "Chase Them Down",
                        "type": "Event",
                        "cost": 2,
                        "traits": ["Thwart"],
                        "resources": [":mental:"],
                    }
                ],
            },
            {
                "product": [
                    {
                        "code": "MC02en",
                        "positions": [30],
                        "set": [{"name": "Goblin Gimmicks", "positions": [1]}],
                    }
                ],
                "side": [
                    {
                        "name": "Goblin Thrall",
                        "type": "Minion",
                        "unique": False,
                        "sch": 1,
                        "atk": 1,
                        "hit_points": "2:player:",
                        "traits": ["Elite"],
                        "keywords": ["Stalwart", "Hinder 1"],
                    }
                ],
            },
        ]
    }


@pytest.fixture
def catalog(cards_document: dict[str, Any], products_document: dict[str, Any]) -> Catalog:
    """A validated catalog built from the sample documents."""
    return Catalog(parse_cards(cards_document), parse_products(products_document))
