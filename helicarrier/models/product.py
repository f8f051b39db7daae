"""Products (boxes and packs) and the card sets they contain."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from helicarrier.models.card_side import U32
from helicarrier.models.vocabulary import ProductType, SetType


class Set(BaseModel):
    """A named set of cards inside a product, e.g. a villain's encounter set."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    type: SetType


class Product(BaseModel):
    """
    A purchasable release.

    Attributes:
        name: Product name, e.g. "Core Set"
        release_date: Date the product was released
        type: Kind of product
        code: Unique product code, e.g. "MC01en"
        wave: Release wave the product belongs to
        sets: Card sets contained in the product
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    name: str
    release_date: date
    type: ProductType
    code: str
    wave: U32
    sets: tuple[Set, ...] = Field(default=(), validation_alias="set")


class ProductDocument(BaseModel):
    """Top level of the products document: a list of [[product]] tables."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    products: tuple[Product, ...] = Field(validation_alias="product")
