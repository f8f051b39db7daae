from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from helicarrier.services.loader import DATA_DIR


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "Helicarrier"
    debug: bool = False

    # Card documents, loaded in order. Set as a JSON list in the environment:
    # CARDS_PATHS='["data/core-set.toml", "data/green-goblin.toml"]'
    cards_paths: list[Path] = [DATA_DIR / "core-set.toml", DATA_DIR / "green-goblin.toml"]

    products_path: Path = DATA_DIR / "products.toml"


settings = Settings()
