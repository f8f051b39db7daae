"""
Structural "included" filtering.

Filters are partially specified copies of the entity they match. Omitted
fields place no constraint, null fields ask for an absent value, and
collection and nested fields match on any overlap.
"""

from helicarrier.filtering.combinators import (
    UNSET,
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
from helicarrier.filtering.matching import (
    card_matches,
    card_product_matches,
    card_set_matches,
    card_side_matches,
    product_matches,
    set_matches,
)

__all__ = [
    # Combinators
    "UNSET",
    "matches_any",
    "matches_scalar",
    "matches_set",
    "requested",
    # Criteria
    "CardFilter",
    "CardProductFilter",
    "CardSetFilter",
    "CardSideFilter",
    "ProductFilter",
    "SetFilter",
    # Matchers
    "card_matches",
    "card_product_matches",
    "card_set_matches",
    "card_side_matches",
    "product_matches",
    "set_matches",
]
