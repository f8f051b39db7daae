from helicarrier.models.card import Card, CardDocument, CardProduct, CardSet
from helicarrier.models.card_side import VARIANT_TYPES, CardSide, CardSideVariant
from helicarrier.models.errors import CatalogError, DecodeError, DocumentError, IntegrityError
from helicarrier.models.product import Product, ProductDocument, Set
from helicarrier.models.scalars import BasicPower, Cost, HitPoints, Keyword, KeywordName
from helicarrier.models.vocabulary import (
    Aspect,
    ProductType,
    Resource,
    SetType,
    Side,
    SideSchemeIcon,
    Trait,
)

__all__ = [
    "Aspect",
    "BasicPower",
    "Card",
    "CardDocument",
    "CardProduct",
    "CardSet",
    "CardSide",
    "CardSideVariant",
    "CatalogError",
    "Cost",
    "DecodeError",
    "DocumentError",
    "HitPoints",
    "IntegrityError",
    "Keyword",
    "KeywordName",
    "Product",
    "ProductDocument",
    "ProductType",
    "Resource",
    "Set",
    "SetType",
    "Side",
    "SideSchemeIcon",
    "Trait",
    "VARIANT_TYPES",
]
