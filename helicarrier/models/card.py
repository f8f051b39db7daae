"""
Card models.

A card is printed in one or more products (at one or more positions in
each) and has one or more sides.

    [[card]]
    aspect = "Justice"

    [[card.product]]
    code = "MC01en"
    positions = [83]

    [[card.product.set]]
    name = "Spider-Man"

    [[card.side]]
    name = "Web-Shooter"
    ...
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from helicarrier.models.card_side import CardSide
from helicarrier.models.vocabulary import Aspect

Position = Annotated[int, Field(ge=1)]


class CardSet(BaseModel):
    """
    Placement of a card within a named set of a product.

    Attributes:
        name: Name of the product set (must exist on the product)
        positions: Positions within that set, if numbered
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    positions: tuple[Position, ...] | None = None


class CardProduct(BaseModel):
    """
    Placement of a card within a product.

    Attributes:
        code: Product code (must exist in the products document)
        positions: Print positions; several values mean the card is
            printed more than once in the product
        sets: Product sets the card belongs to, if any
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    code: str
    positions: tuple[Position, ...] = Field(min_length=1)
    sets: tuple[CardSet, ...] | None = Field(default=None, validation_alias="set")


class Card(BaseModel):
    """A card identity with its printings and sides."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    products: tuple[CardProduct, ...] = Field(validation_alias="product", min_length=1)
    sides: tuple[CardSide, ...] = Field(validation_alias="side", min_length=1)
    aspect: Aspect | None = None


class CardDocument(BaseModel):
    """Top level of a cards document: a list of [[card]] tables."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    cards: tuple[Card, ...] = Field(validation_alias="card")
