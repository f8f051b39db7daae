"""
Card side model.

A card side is one printed face of a card. Which stats it carries depends on
its type: a Hero has THW/ATK/DEF and a hand size, an Event has a cost and
resources, a Treachery only has boost icons. Each type is its own model, and
CardSide.variant is a discriminated union over them, keyed by the document's
`type` value.

In the document the type and its stats sit flat in the side table:

    [[card.side]]
    name = "Spider-Man"
    type = "Hero"
    side = "A"
    thw = 1
    ...

INVARIANTS:
- The set of types is closed; an unknown or missing type is a DecodeError
- A type rejects attributes it does not declare
- A stat a type does not declare is not applicable: its projection is None.
  Projected stats are never nullable on the types that declare them, so None
  is unambiguous.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from helicarrier.models.errors import DecodeError
from helicarrier.models.scalars import (
    BasicPower,
    BasicPowerField,
    Cost,
    CostField,
    HitPoints,
    HitPointsField,
    Keyword,
    KeywordField,
)
from helicarrier.models.vocabulary import Resource, Side, SideSchemeIcon, Trait

U8 = Annotated[int, Field(ge=0, le=255)]
U32 = Annotated[int, Field(ge=0, le=4_294_967_295)]

_VARIANT_CONFIG = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class Hero(BaseModel):
    model_config = _VARIANT_CONFIG

    type: Literal["Hero"] = "Hero"
    side: Side
    unique: bool = False
    thw: BasicPowerField
    atk: BasicPowerField
    def_: BasicPowerField = Field(alias="def")
    hand_size: U32
    hit_points: HitPointsField
    traits: tuple[Trait, ...] = ()


class AlterEgo(BaseModel):
    model_config = _VARIANT_CONFIG

    type: Literal["Alter-Ego"] = "Alter-Ego"
    side: Side
    unique: bool = False
    rec: BasicPowerField
    hand_size: U32
    hit_points: HitPointsField
    traits: tuple[Trait, ...] = ()


class Ally(BaseModel):
    model_config = _VARIANT_CONFIG

    type: Literal["Ally"] = "Ally"
    subname: str | None = None
    unique: bool
    cost: CostField
    thw: BasicPowerField
    thw_consequential: U32
    atk: BasicPowerField
    atk_consequential: U32
    hit_points: HitPointsField
    traits: tuple[Trait, ...] = ()
    resources: tuple[Resource, ...]


class Event(BaseModel):
    model_config = _VARIANT_CONFIG

    type: Literal["Event"] = "Event"
    cost: CostField
    traits: tuple[Trait, ...] = ()
    resources: tuple[Resource, ...]


class Obligation(BaseModel):
    model_config = _VARIANT_CONFIG

    type: Literal["Obligation"] = "Obligation"
    boost_icons: U8 = 0


class ResourceCard(BaseModel):
    """A player card whose only purpose is to be spent as resources."""

    model_config = _VARIANT_CONFIG

    type: Literal["Resource"] = "Resource"
    resources: tuple[Resource, ...]


class Support(BaseModel):
    model_config = _VARIANT_CONFIG

    type: Literal["Support"] = "Support"
    cost: CostField
    unique: bool = False
    traits: tuple[Trait, ...] = ()
    resources: tuple[Resource, ...]


class Upgrade(BaseModel):
    model_config = _VARIANT_CONFIG

    type: Literal["Upgrade"] = "Upgrade"
    cost: CostField
    unique: bool = False
    resources: tuple[Resource, ...]
    traits: tuple[Trait, ...] = ()


class Attachment(BaseModel):
    model_config = _VARIANT_CONFIG

    type: Literal["Attachment"] = "Attachment"
    boost_icons: U8
    traits: tuple[Trait, ...] = ()


class Minion(BaseModel):
    model_config = _VARIANT_CONFIG

    type: Literal["Minion"] = "Minion"
    unique: bool
    sch: BasicPowerField
    atk: BasicPowerField
    hit_points: HitPointsField
    traits: tuple[Trait, ...] = ()
    boost_icons: U8 = 0
    boost_star_icon: bool = False
    boost_text: str | None = None
    keywords: tuple[KeywordField, ...] = ()


class SideScheme(BaseModel):
    model_config = _VARIANT_CONFIG

    type: Literal["Side Scheme"] = "Side Scheme"
    icons: tuple[SideSchemeIcon, ...] | None = None
    traits: tuple[Trait, ...] = ()
    # Threat is printed as text, e.g. "3" or "2:player:"
    starting_threat: str
    boost_icons: U8 = 0
    boost_star_icon: bool = False
    boost_text: str | None = None


class Treachery(BaseModel):
    model_config = _VARIANT_CONFIG

    type: Literal["Treachery"] = "Treachery"
    boost_icons: U8 = 0
    boost_star_icon: bool = False
    boost_text: str | None = None


CardSideVariant = Annotated[
    Hero
    | AlterEgo
    | Ally
    | Event
    | Obligation
    | ResourceCard
    | Support
    | Upgrade
    | Attachment
    | Minion
    | SideScheme
    | Treachery,
    Field(discriminator="type"),
]

VARIANT_TYPES: dict[str, type[BaseModel]] = {
    model.model_fields["type"].default: model
    for model in (
        Hero,
        AlterEgo,
        Ally,
        Event,
        Obligation,
        ResourceCard,
        Support,
        Upgrade,
        Attachment,
        Minion,
        SideScheme,
        Treachery,
    )
}

VARIANT_GRAMMAR = "one of " + ", ".join(repr(tag) for tag in VARIANT_TYPES)


def _check_tag(tag: Any) -> None:
    if not isinstance(tag, str) or tag not in VARIANT_TYPES:
        raise DecodeError(tag, VARIANT_GRAMMAR)


class CardSide(BaseModel):
    """
    One printed face of a card.

    Attributes:
        name: Printed name
        text: Rules text, if any
        flavor_text: Flavor text, if any
        illustrators: Credited illustrators, None when uncredited
        variant: Type-specific stats
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    text: str | None = None
    flavor_text: str | None = None
    illustrators: tuple[str, ...] | None = None
    variant: CardSideVariant

    @model_validator(mode="before")
    @classmethod
    def _split_variant(cls, data: Any) -> Any:
        """
        Move the flattened type and stats of a document side into `variant`.

        Only an already built variant model is taken as is. A `variant` key in
        a document is an ordinary, unknown attribute.
        """
        if not isinstance(data, dict):
            return data

        if isinstance(data.get("variant"), BaseModel):
            return data

        _check_tag(data.get("type"))
        shared = {key: value for key, value in data.items() if key in _SHARED_FIELDS}
        shared["variant"] = {
            key: value for key, value in data.items() if key not in _SHARED_FIELDS
        }
        return shared

    @property
    def type(self) -> str:
        """The document tag of this side, e.g. "Hero" or "Side Scheme"."""
        return self.variant.type


_SHARED_FIELDS = frozenset({"name", "text", "flavor_text", "illustrators"})


# =============================================================================
# PROJECTIONS
# =============================================================================
#
# Each returns the stat if the side's type declares it, None otherwise.


def _project(card_side: CardSide, attribute: str) -> Any:
    return getattr(card_side.variant, attribute, None)


def unique(card_side: CardSide) -> bool | None:
    return _project(card_side, "unique")


def side(card_side: CardSide) -> Side | None:
    return _project(card_side, "side")


def thw(card_side: CardSide) -> BasicPower | None:
    return _project(card_side, "thw")


def atk(card_side: CardSide) -> BasicPower | None:
    return _project(card_side, "atk")


def def_(card_side: CardSide) -> BasicPower | None:
    return _project(card_side, "def_")


def rec(card_side: CardSide) -> BasicPower | None:
    return _project(card_side, "rec")


def sch(card_side: CardSide) -> BasicPower | None:
    return _project(card_side, "sch")


def thw_consequential(card_side: CardSide) -> int | None:
    return _project(card_side, "thw_consequential")


def atk_consequential(card_side: CardSide) -> int | None:
    return _project(card_side, "atk_consequential")


def hand_size(card_side: CardSide) -> int | None:
    return _project(card_side, "hand_size")


def hit_points(card_side: CardSide) -> HitPoints | None:
    return _project(card_side, "hit_points")


def cost(card_side: CardSide) -> Cost | None:
    return _project(card_side, "cost")


def boost_icons(card_side: CardSide) -> int | None:
    return _project(card_side, "boost_icons")


def boost_star_icon(card_side: CardSide) -> bool | None:
    return _project(card_side, "boost_star_icon")


def traits(card_side: CardSide) -> tuple[Trait, ...] | None:
    return _project(card_side, "traits")


def resources(card_side: CardSide) -> tuple[Resource, ...] | None:
    return _project(card_side, "resources")


def keywords(card_side: CardSide) -> tuple[Keyword, ...] | None:
    return _project(card_side, "keywords")
