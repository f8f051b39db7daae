"""
Catalog: the loaded dataset and its lookup indexes.

A Catalog owns the cards and products for the lifetime of the process.
It is built once, validated once, and then only read. Queries take the
catalog as an argument rather than reaching for global state, so tests can
build as many independent catalogs as they like.

INVARIANTS:
- Product codes are unique across the catalog
- Set names are unique across the catalog
- Every card product code resolves to a product
- Every card set name exists in that card product's own product
- A Catalog that failed any of the above is never returned
"""

import logging
from collections.abc import Iterable

from helicarrier.models.card import Card
from helicarrier.models.errors import IntegrityError
from helicarrier.models.product import Product, Set

logger = logging.getLogger(__name__)


class Catalog:
    """
    Immutable view over the card and product documents.

    Args:
        cards: Cards in document order
        products: Products in document order

    Raises:
        IntegrityError: On duplicate keys or dangling card references
    """

    def __init__(self, cards: Iterable[Card], products: Iterable[Product]) -> None:
        self._cards = tuple(cards)
        self._products = tuple(products)
        self._product_index = self._build_product_index(self._products)
        self._sets_by_name = self._build_set_index(self._products)
        self._validate_cards()

    @property
    def cards(self) -> tuple[Card, ...]:
        return self._cards

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    def lookup_product(self, code: str) -> Product | None:
        """Return the product with this code, or None."""
        index = self._product_index.get(code)
        if index is None:
            return None
        return self._products[index]

    def lookup_set(self, name: str) -> Set | None:
        """Return the product set with this name, or None."""
        return self._sets_by_name.get(name)

    @staticmethod
    def _build_product_index(products: tuple[Product, ...]) -> dict[str, int]:
        """Map product code -> position in the products tuple."""
        index: dict[str, int] = {}
        for position, product in enumerate(products):
            if product.code in index:
                raise _integrity_failure(f"Duplicate product code {product.code!r}")
            index[product.code] = position
        return index

    @staticmethod
    def _build_set_index(products: tuple[Product, ...]) -> dict[str, Set]:
        """Map set name -> set, across every product."""
        sets: dict[str, Set] = {}
        for product in products:
            for product_set in product.sets:
                if product_set.name in sets:
                    raise _integrity_failure(
                        f"Duplicate set name {product_set.name!r} (in product {product.code!r})"
                    )
                sets[product_set.name] = product_set
        return sets

    def _validate_cards(self) -> None:
        """Check that every card product and card set resolves."""
        for card in self._cards:
            card_name = card.sides[0].name
            for card_product in card.products:
                product = self.lookup_product(card_product.code)
                if product is None:
                    raise _integrity_failure(
                        f"Card {card_name!r} references unknown product {card_product.code!r}"
                    )

                if card_product.sets is None:
                    continue

                product_set_names = {product_set.name for product_set in product.sets}
                for card_set in card_product.sets:
                    if card_set.name not in product_set_names:
                        raise _integrity_failure(
                            f"Card {card_name!r} references set {card_set.name!r}, "
                            f"which product {product.code!r} does not contain"
                        )


def _integrity_failure(message: str) -> IntegrityError:
    logger.error("Catalog integrity check failed: %s", message)
    return IntegrityError(message)
