"""
Catalog API endpoints.

Read-only queries over the loaded catalog. Search endpoints take a filter
body where every field is optional: omitted fields are ignored, null
fields ask for an absent value. An empty body returns everything.
"""

from datetime import date
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict, Field

from helicarrier.api.dependencies import get_catalog
from helicarrier.filtering import CardFilter, ProductFilter
from helicarrier.models import card_side as projections
from helicarrier.models.card import Card, CardProduct, CardSet
from helicarrier.models.card_side import CardSide
from helicarrier.models.product import Product, Set
from helicarrier.models.vocabulary import (
    Aspect,
    ProductType,
    Resource,
    SetType,
    Side,
    SideSchemeIcon,
    Trait,
)
from helicarrier.services.catalog import Catalog
from helicarrier.services.queries import get_product, list_cards, list_products

router = APIRouter(tags=["catalog"])


class CardSetResponse(BaseModel):
    """A card's placement in a product set, with the set's type."""

    name: str
    positions: list[int] | None = None
    type: SetType | None = Field(
        default=None,
        description="Type of the product set (None if the set is unknown)",
    )


class CardProductResponse(BaseModel):
    """A card's placement in a product, with the product's details."""

    code: str
    positions: list[int]
    sets: list[CardSetResponse] | None = None
    name: str | None = None
    release_date: date | None = None
    type: ProductType | None = None
    wave: int | None = None
    product_sets: list[Set] | None = Field(
        default=None,
        description="All sets of the referenced product",
    )


class CardSideResponse(BaseModel):
    """
    One card side.

    Stats are rendered as printed ("X", "2 per Player", "Incite 1"). Stats
    the side's type does not have are null.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    type: str
    text: str | None = None
    flavor_text: str | None = None
    illustrators: list[str] | None = None

    subname: str | None = None
    side: Side | None = None
    unique: bool | None = None
    cost: str | None = None
    thw: str | None = None
    thw_consequential: int | None = None
    atk: str | None = None
    atk_consequential: int | None = None
    def_: str | None = Field(default=None, alias="def")
    rec: str | None = None
    sch: str | None = None
    hand_size: int | None = None
    hit_points: str | None = None
    starting_threat: str | None = None
    icons: list[SideSchemeIcon] | None = None
    traits: list[Trait] | None = None
    resources: list[Resource] | None = None
    keywords: list[str] | None = None
    boost_icons: int | None = None
    boost_star_icon: bool | None = None
    boost_text: str | None = None


class CardResponse(BaseModel):
    """A card with its printings and sides."""

    aspect: Aspect | None = None
    products: list[CardProductResponse]
    sides: list[CardSideResponse]


def _card_set_response(card_set: CardSet, catalog: Catalog) -> CardSetResponse:
    product_set = catalog.lookup_set(card_set.name)
    return CardSetResponse(
        name=card_set.name,
        positions=list(card_set.positions) if card_set.positions is not None else None,
        type=product_set.type if product_set is not None else None,
    )


def _card_product_response(
    card_product: CardProduct,
    catalog: Catalog,
    set_name: str | None = None,
) -> CardProductResponse:
    sets = None
    if card_product.sets is not None:
        sets = [
            _card_set_response(card_set, catalog)
            for card_set in card_product.sets
            if set_name is None or card_set.name == set_name
        ]

    product = catalog.lookup_product(card_product.code)
    if product is None:
        return CardProductResponse(
            code=card_product.code,
            positions=list(card_product.positions),
            sets=sets,
        )

    return CardProductResponse(
        code=card_product.code,
        positions=list(card_product.positions),
        sets=sets,
        name=product.name,
        release_date=product.release_date,
        type=product.type,
        wave=product.wave,
        product_sets=list(product.sets),
    )


def _rendered(value: Any) -> str | None:
    return None if value is None else str(value)


def _keywords(card_side: CardSide) -> list[str] | None:
    keywords = projections.keywords(card_side)
    return None if keywords is None else [str(keyword) for keyword in keywords]


def _card_side_response(card_side: CardSide) -> CardSideResponse:
    variant = card_side.variant
    return CardSideResponse(
        name=card_side.name,
        type=card_side.type,
        text=card_side.text,
        flavor_text=card_side.flavor_text,
        illustrators=card_side.illustrators,
        subname=getattr(variant, "subname", None),
        side=projections.side(card_side),
        unique=projections.unique(card_side),
        cost=_rendered(projections.cost(card_side)),
        thw=_rendered(projections.thw(card_side)),
        thw_consequential=projections.thw_consequential(card_side),
        atk=_rendered(projections.atk(card_side)),
        atk_consequential=projections.atk_consequential(card_side),
        def_=_rendered(projections.def_(card_side)),
        rec=_rendered(projections.rec(card_side)),
        sch=_rendered(projections.sch(card_side)),
        hand_size=projections.hand_size(card_side),
        hit_points=_rendered(projections.hit_points(card_side)),
        starting_threat=getattr(variant, "starting_threat", None),
        icons=getattr(variant, "icons", None),
        traits=projections.traits(card_side),
        resources=projections.resources(card_side),
        keywords=_keywords(card_side),
        boost_icons=projections.boost_icons(card_side),
        boost_star_icon=projections.boost_star_icon(card_side),
        boost_text=getattr(variant, "boost_text", None),
    )


def card_to_response(card: Card, catalog: Catalog, set_name: str | None = None) -> CardResponse:
    """
    Present a card with its product references resolved.

    If set_name is given, each card product lists only the sets of that name.
    """
    return CardResponse(
        aspect=card.aspect,
        products=[_card_product_response(cp, catalog, set_name) for cp in card.products],
        sides=[_card_side_response(card_side) for card_side in card.sides],
    )


@router.post("/products/search", response_model=list[Product])
async def search_products(
    catalog: Annotated[Catalog, Depends(get_catalog)],
    criteria: Annotated[ProductFilter | None, Body()] = None,
) -> list[Product]:
    """
    List products matching a filter.

    Products are returned in document order. `sets` matches when any of the
    product's sets matches any of the given set filters.
    """
    return list_products(catalog, criteria)


@router.get("/products/{code}", response_model=Product)
async def get_product_by_code(
    code: str,
    catalog: Annotated[Catalog, Depends(get_catalog)],
) -> Product:
    """Get one product by its code."""
    product = get_product(catalog, code)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No product with code '{code}'",
        )
    return product


@router.post("/cards/search", response_model=list[CardResponse])
async def search_cards(
    catalog: Annotated[Catalog, Depends(get_catalog)],
    criteria: Annotated[CardFilter | None, Body()] = None,
    set_name: Annotated[
        str | None,
        Query(description="Only list card sets with this name in the response"),
    ] = None,
) -> list[CardResponse]:
    """
    List cards matching a filter.

    `products` and `sides` match when any of the card's products (sides)
    matches any of the given sub-filters. Product name, release date, type
    and wave filters are resolved against the products document.

    `set_name` narrows the sets shown for each card product; it does not
    filter cards.
    """
    return [card_to_response(card, catalog, set_name) for card in list_cards(catalog, criteria)]
