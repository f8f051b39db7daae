"""Tests for the data validation job."""

from pathlib import Path

import pytest

from helicarrier.jobs.validate_data import main, run_validation
from helicarrier.services.loader import DATA_DIR

PRODUCTS_TOML = """\
[[product]]
name = "Core Set"
release_date = 2019-11-01
type = "Core Set"
code = "MC01en"
wave = 1
"""

CARDS_TOML = """\
[[card]]
aspect = "Basic"

[[card.product]]
code = "{code}"
positions = [94]

[[card.side]]
name = "Energy"
type = "Resource"
resources = [":energy:"]
"""


@pytest.fixture
def products_path(tmp_path: Path) -> Path:
    path = tmp_path / "products.toml"
    path.write_text(PRODUCTS_TOML)
    return path


class TestRunValidation:
    def test_valid_documents(self, tmp_path: Path, products_path: Path) -> None:
        cards_path = tmp_path / "cards.toml"
        cards_path.write_text(CARDS_TOML.format(code="MC01en"))

        catalog = run_validation([cards_path], products_path)

        assert catalog is not None
        assert len(catalog.cards) == 1

    def test_dangling_reference(
        self, tmp_path: Path, products_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        cards_path = tmp_path / "cards.toml"
        cards_path.write_text(CARDS_TOML.format(code="MC99en"))

        assert run_validation([cards_path], products_path) is None
        assert "MC99en" in caplog.text

    def test_missing_document(self, tmp_path: Path, products_path: Path) -> None:
        assert run_validation([tmp_path / "missing.toml"], products_path) is None


class TestMain:
    def test_shipped_documents_pass(self) -> None:
        assert main([]) == 0

    def test_explicit_paths(self) -> None:
        argv = [
            "--cards",
            str(DATA_DIR / "core-set.toml"),
            "--products",
            str(DATA_DIR / "products.toml"),
        ]

        assert main(argv) == 0

    def test_bad_document_fails(self, tmp_path: Path, products_path: Path) -> None:
        cards_path = tmp_path / "cards.toml"
        cards_path.write_text('[[card]]\naspect = "Mystic"\n')

        assert main(["--cards", str(cards_path), "--products", str(products_path)]) == 1
