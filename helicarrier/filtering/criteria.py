"""
Filter ("included") input models.

Each model mirrors the entity it filters. All fields are optional; a field
that is left out places no constraint, a field given as null asks for the
entity's value to be absent. See filtering.combinators for the rules.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from helicarrier.models.scalars import BasicPowerField, CostField, HitPointsField, KeywordField
from helicarrier.models.vocabulary import (
    Aspect,
    ProductType,
    Resource,
    SetType,
    Side,
    Trait,
)

_FILTER_CONFIG = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class SetFilter(BaseModel):
    """Filter for a product's sets."""

    model_config = _FILTER_CONFIG

    name: str | None = None
    type: SetType | None = None


class ProductFilter(BaseModel):
    """Filter for products."""

    model_config = _FILTER_CONFIG

    name: str | None = None
    release_date: date | None = None
    type: ProductType | None = None
    code: str | None = None
    wave: int | None = None
    sets: list[SetFilter] | None = Field(
        default=None,
        description="Matches when any of the product's sets matches any of these",
    )


class CardSetFilter(BaseModel):
    """Filter for the sets a card is placed in. `type` comes from the product set."""

    model_config = _FILTER_CONFIG

    name: str | None = None
    positions: list[int] | None = Field(
        default=None,
        description="Matches when any position overlaps",
    )
    type: SetType | None = None


class CardProductFilter(BaseModel):
    """
    Filter for the products a card is printed in.

    `name`, `release_date`, `type` and `wave` are read from the referenced
    product.
    """

    model_config = _FILTER_CONFIG

    code: str | None = None
    positions: list[int] | None = Field(
        default=None,
        description="Matches when any position overlaps",
    )
    sets: list[CardSetFilter] | None = None
    name: str | None = None
    release_date: date | None = None
    type: ProductType | None = None
    wave: int | None = None


class CardSideFilter(BaseModel):
    """
    Filter for card sides.

    Stats only exist on some side types (a filter on `atk` never matches an
    Event). Collection fields match on overlap.
    """

    model_config = _FILTER_CONFIG

    name: str | None = None
    text: str | None = None
    flavor_text: str | None = None
    illustrators: list[str] | None = None
    type: str | None = Field(default=None, description='Side type, e.g. "Hero" or "Side Scheme"')

    side: Side | None = None
    unique: bool | None = None
    thw: BasicPowerField | None = None
    thw_consequential: int | None = None
    atk: BasicPowerField | None = None
    atk_consequential: int | None = None
    def_: BasicPowerField | None = Field(default=None, alias="def")
    rec: BasicPowerField | None = None
    sch: BasicPowerField | None = None
    hand_size: int | None = None
    hit_points: HitPointsField | None = None
    cost: CostField | None = None
    boost_icons: int | None = None
    boost_star_icon: bool | None = None

    traits: list[Trait] | None = None
    resources: list[Resource] | None = None
    keywords: list[KeywordField] | None = None


class CardFilter(BaseModel):
    """Filter for cards."""

    model_config = _FILTER_CONFIG

    aspect: Aspect | None = None
    products: list[CardProductFilter] | None = Field(
        default=None,
        description="Matches when any of the card's products matches any of these",
    )
    sides: list[CardSideFilter] | None = Field(
        default=None,
        description="Matches when any of the card's sides matches any of these",
    )
