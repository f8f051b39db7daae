from helicarrier.api.catalog import router as catalog_router
from helicarrier.api.health import router as health_router

__all__ = [
    "catalog_router",
    "health_router",
]
