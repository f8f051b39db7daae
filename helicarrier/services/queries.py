"""
Query resolution.

Root queries over a Catalog. Each one walks the whole collection, keeps
entities that match the filter, and returns them in document order.
There is no sorting, paging or limit.
"""

import logging

from helicarrier.filtering import CardFilter, ProductFilter, card_matches, product_matches
from helicarrier.models.card import Card
from helicarrier.models.product import Product
from helicarrier.services.catalog import Catalog

logger = logging.getLogger(__name__)


def list_products(catalog: Catalog, criteria: ProductFilter | None = None) -> list[Product]:
    """
    List products matching a filter.

    Args:
        catalog: The loaded catalog
        criteria: Product filter; None returns every product

    Returns:
        Matching products in document order
    """
    if criteria is None:
        return list(catalog.products)

    matches = [product for product in catalog.products if product_matches(product, criteria)]
    logger.debug("Product query matched %d of %d", len(matches), len(catalog.products))
    return matches


def list_cards(catalog: Catalog, criteria: CardFilter | None = None) -> list[Card]:
    """
    List cards matching a filter.

    Args:
        catalog: The loaded catalog
        criteria: Card filter; None returns every card

    Returns:
        Matching cards in document order
    """
    if criteria is None:
        return list(catalog.cards)

    matches = [card for card in catalog.cards if card_matches(card, criteria, catalog)]
    logger.debug("Card query matched %d of %d", len(matches), len(catalog.cards))
    return matches


def get_product(catalog: Catalog, code: str) -> Product | None:
    """Get one product by code."""
    return catalog.lookup_product(code)
