import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from helicarrier.api import catalog_router, health_router
from helicarrier.config import settings
from helicarrier.services.loader import load_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load and validate the catalog before serving; refuse to start on bad data."""
    app.state.catalog = load_catalog(settings.cards_paths, settings.products_path)
    yield
    logger.info("Shutting down")


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("helicarrier"),
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(catalog_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
