from helicarrier.services.catalog import Catalog
from helicarrier.services.loader import (
    DATA_DIR,
    load_catalog,
    parse_cards,
    parse_products,
    read_document,
)
from helicarrier.services.queries import get_product, list_cards, list_products

__all__ = [
    "Catalog",
    "DATA_DIR",
    "get_product",
    "list_cards",
    "list_products",
    "load_catalog",
    "parse_cards",
    "parse_products",
    "read_document",
]
