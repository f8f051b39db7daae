"""
Health check endpoints.

Provides liveness and readiness probes. Readiness means the catalog has
been loaded and validated.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from helicarrier.api.dependencies import get_loaded_catalog
from helicarrier.services.catalog import Catalog

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    catalog: str | None = None
    cards: int | None = None
    products: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not check the catalog.
    """
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(
    response: Response,
    catalog: Annotated[Catalog | None, Depends(get_loaded_catalog)],
) -> HealthResponse:
    """
    Readiness probe.

    Returns ready once the catalog is loaded, with its size.
    Returns 503 if it is not.
    """
    if catalog is None:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="not ready", catalog="not loaded")

    return HealthResponse(
        status="ready",
        catalog="loaded",
        cards=len(catalog.cards),
        products=len(catalog.products),
    )
