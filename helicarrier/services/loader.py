"""
Document loader.

Reads the TOML card and product documents, validates them, and builds the
Catalog. Everything that can go wrong with the data goes wrong here, before
a single query is served:

- TOML syntax errors            -> DocumentError
- unknown fields, bad tokens    -> DocumentError (DecodeErrors attached)
- duplicate keys, dangling refs -> IntegrityError

A document is accepted or rejected as a whole; there is no partial load.
"""

import logging
import tomllib
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from helicarrier.models.card import Card, CardDocument
from helicarrier.models.errors import DocumentError
from helicarrier.models.product import Product, ProductDocument
from helicarrier.services.catalog import Catalog

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent / "data"


def read_document(path: Path) -> dict[str, Any]:
    """
    Read a TOML document.

    Raises:
        FileNotFoundError: If the document doesn't exist
        DocumentError: If the document is not valid TOML
    """
    if not path.exists():
        raise FileNotFoundError(f"Data document not found at {path}.")

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise DocumentError(str(path), f"invalid TOML: {e}") from e


def parse_products(data: Mapping[str, Any], source: str = "products") -> tuple[Product, ...]:
    """
    Validate a products document.

    Raises:
        DocumentError: If the document does not match the product grammar
    """
    try:
        return ProductDocument.model_validate(data).products
    except ValidationError as e:
        raise _rejected(source, e) from e


def parse_cards(data: Mapping[str, Any], source: str = "cards") -> tuple[Card, ...]:
    """
    Validate a cards document.

    Raises:
        DocumentError: If the document does not match the card grammar
    """
    try:
        return CardDocument.model_validate(data).cards
    except ValidationError as e:
        raise _rejected(source, e) from e


def load_catalog(card_paths: Iterable[Path], products_path: Path) -> Catalog:
    """
    Load and cross-check the documents.

    Args:
        card_paths: Card documents, loaded in order
        products_path: The products document

    Returns:
        A validated Catalog

    Raises:
        FileNotFoundError: If a document doesn't exist
        DocumentError: If a document fails to parse or validate
        IntegrityError: If the documents don't cross-reference
    """
    products = parse_products(read_document(products_path), str(products_path))
    logger.info("Loaded %d products from %s", len(products), products_path)

    cards: list[Card] = []
    for path in card_paths:
        document_cards = parse_cards(read_document(path), str(path))
        logger.info("Loaded %d cards from %s", len(document_cards), path)
        cards.extend(document_cards)

    catalog = Catalog(cards, products)
    logger.info(
        "Catalog ready: %d cards, %d products",
        len(catalog.cards),
        len(catalog.products),
    )
    return catalog


def _rejected(source: str, error: ValidationError) -> DocumentError:
    logger.error(
        "Rejected %s: %d validation error(s)",
        source,
        error.error_count(),
    )
    return DocumentError(source, str(error), errors=error.errors(include_url=False))
