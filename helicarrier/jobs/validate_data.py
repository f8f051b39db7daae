"""
Validate the card and product documents.

Runs the same load the service runs at startup and reports the first
problem found. Use it in CI, or after editing a document, to catch bad
tokens and dangling references before deploying.
"""

import argparse
import logging
import sys
from pathlib import Path

from helicarrier.config import settings
from helicarrier.models.errors import CatalogError
from helicarrier.services.catalog import Catalog
from helicarrier.services.loader import load_catalog

logger = logging.getLogger(__name__)


def run_validation(card_paths: list[Path], products_path: Path) -> Catalog | None:
    """
    Load the documents and report the outcome.

    Returns:
        The catalog if the documents are valid, None otherwise
    """
    try:
        catalog = load_catalog(card_paths, products_path)
    except (FileNotFoundError, CatalogError) as e:
        logger.error("Validation failed: %s", e)
        return None

    logger.info(
        "Validation passed: %d cards, %d products",
        len(catalog.cards),
        len(catalog.products),
    )
    return catalog


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    parser = argparse.ArgumentParser(description="Validate card and product documents")
    parser.add_argument(
        "--cards",
        nargs="+",
        type=Path,
        default=settings.cards_paths,
        help="Card documents (default: the configured cards_paths)",
    )
    parser.add_argument(
        "--products",
        type=Path,
        default=settings.products_path,
        help="Products document (default: the configured products_path)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    catalog = run_validation(args.cards, args.products)
    return 0 if catalog is not None else 1


if __name__ == "__main__":
    sys.exit(main())
