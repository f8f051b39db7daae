"""
Entity matchers.

One function per filterable entity. Each checks every field of its filter
with the combinators and ANDs the results. Fields that live on another
entity (a card product's name lives on its Product, a card set's type on
the product's Set) are resolved through the catalog first; if the
reference does not resolve, those fields are not applicable.

None of these functions raise.
"""

from collections.abc import Callable
from functools import partial
from operator import attrgetter
from typing import TYPE_CHECKING, Any

from helicarrier.filtering.combinators import (
    matches_any,
    matches_scalar,
    matches_set,
    requested,
)
from helicarrier.filtering.criteria import (
    CardFilter,
    CardProductFilter,
    CardSetFilter,
    CardSideFilter,
    ProductFilter,
    SetFilter,
)
from helicarrier.models import card_side as projections
from helicarrier.models.card import Card, CardProduct, CardSet
from helicarrier.models.card_side import CardSide
from helicarrier.models.product import Product, Set

if TYPE_CHECKING:
    from helicarrier.services.catalog import Catalog

Accessor = Callable[[Any], Any]


def _scalars_match(entity: Any, criteria: Any, fields: dict[str, Accessor]) -> bool:
    return all(
        matches_scalar(accessor(entity), requested(criteria, field))
        for field, accessor in fields.items()
    )


def _sets_match(entity: Any, criteria: Any, fields: dict[str, Accessor]) -> bool:
    return all(
        matches_set(accessor(entity), requested(criteria, field))
        for field, accessor in fields.items()
    )


# =============================================================================
# PRODUCTS
# =============================================================================

_SET_SCALARS: dict[str, Accessor] = {
    "name": attrgetter("name"),
    "type": attrgetter("type"),
}

_PRODUCT_SCALARS: dict[str, Accessor] = {
    "name": attrgetter("name"),
    "release_date": attrgetter("release_date"),
    "type": attrgetter("type"),
    "code": attrgetter("code"),
    "wave": attrgetter("wave"),
}


def set_matches(product_set: Set, criteria: SetFilter) -> bool:
    return _scalars_match(product_set, criteria, _SET_SCALARS)


def product_matches(product: Product, criteria: ProductFilter) -> bool:
    """Check a product against a product filter."""
    return _scalars_match(product, criteria, _PRODUCT_SCALARS) and matches_any(
        product.sets, requested(criteria, "sets"), set_matches
    )


# =============================================================================
# CARD PRODUCTS AND CARD SETS
# =============================================================================


def card_set_matches(card_set: CardSet, criteria: CardSetFilter, catalog: "Catalog") -> bool:
    """
    Check a card set against a card set filter.

    `type` is read from the product set of the same name.
    """
    product_set = catalog.lookup_set(card_set.name)
    set_type = product_set.type if product_set is not None else None

    return (
        matches_scalar(card_set.name, requested(criteria, "name"))
        and matches_scalar(set_type, requested(criteria, "type"))
        and matches_set(card_set.positions, requested(criteria, "positions"))
    )


def _product_field(field: str) -> Callable[[Product | None], Any]:
    def accessor(product: Product | None) -> Any:
        return None if product is None else getattr(product, field)

    return accessor


_REFERENCED_PRODUCT_SCALARS: dict[str, Accessor] = {
    field: _product_field(field) for field in ("name", "release_date", "type", "wave")
}


def card_product_matches(
    card_product: CardProduct,
    criteria: CardProductFilter,
    catalog: "Catalog",
) -> bool:
    """
    Check a card product against a card product filter.

    `name`, `release_date`, `type` and `wave` are read from the product the
    code refers to.
    """
    product = catalog.lookup_product(card_product.code)

    return (
        matches_scalar(card_product.code, requested(criteria, "code"))
        and matches_set(card_product.positions, requested(criteria, "positions"))
        and _scalars_match(product, criteria, _REFERENCED_PRODUCT_SCALARS)
        and matches_any(
            card_product.sets,
            requested(criteria, "sets"),
            partial(card_set_matches, catalog=catalog),
        )
    )


# =============================================================================
# CARD SIDES
# =============================================================================

_SIDE_SCALARS: dict[str, Accessor] = {
    "name": attrgetter("name"),
    "text": attrgetter("text"),
    "flavor_text": attrgetter("flavor_text"),
    "type": attrgetter("type"),
    "side": projections.side,
    "unique": projections.unique,
    "thw": projections.thw,
    "thw_consequential": projections.thw_consequential,
    "atk": projections.atk,
    "atk_consequential": projections.atk_consequential,
    "def_": projections.def_,
    "rec": projections.rec,
    "sch": projections.sch,
    "hand_size": projections.hand_size,
    "hit_points": projections.hit_points,
    "cost": projections.cost,
    "boost_icons": projections.boost_icons,
    "boost_star_icon": projections.boost_star_icon,
}

_SIDE_SETS: dict[str, Accessor] = {
    "illustrators": attrgetter("illustrators"),
    "traits": projections.traits,
    "resources": projections.resources,
    "keywords": projections.keywords,
}


def card_side_matches(card_side: CardSide, criteria: CardSideFilter) -> bool:
    """
    Check a card side against a card side filter.

    A stat the side's type does not have only matches an explicit null.
    """
    return _scalars_match(card_side, criteria, _SIDE_SCALARS) and _sets_match(
        card_side, criteria, _SIDE_SETS
    )


# =============================================================================
# CARDS
# =============================================================================


def card_matches(card: Card, criteria: CardFilter, catalog: "Catalog") -> bool:
    """Check a card against a card filter."""
    return (
        matches_scalar(card.aspect, requested(criteria, "aspect"))
        and matches_any(
            card.products,
            requested(criteria, "products"),
            partial(card_product_matches, catalog=catalog),
        )
        and matches_any(card.sides, requested(criteria, "sides"), card_side_matches)
    )
