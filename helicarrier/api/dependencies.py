"""Request dependencies shared by the routers."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from helicarrier.services.catalog import Catalog


def get_loaded_catalog(request: Request) -> Catalog | None:
    """The catalog loaded at startup, or None if loading has not finished."""
    return getattr(request.app.state, "catalog", None)


def get_catalog(
    catalog: Annotated[Catalog | None, Depends(get_loaded_catalog)],
) -> Catalog:
    """The catalog loaded at startup; 503 if it is not available."""
    if catalog is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Card catalog not loaded. Please try again later.",
        )
    return catalog
