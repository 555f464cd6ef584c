from fastapi import FastAPI

from .catalog import router as catalog_router
from .property_resources import router as property_resources_router
from .relationships import router as relationships_router
from .rules import router as rules_router
from .scans import router as scans_router
from .search import router as search_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(catalog_router)
    app.include_router(rules_router)
    app.include_router(property_resources_router)
    app.include_router(scans_router)
    app.include_router(search_router)
    app.include_router(relationships_router)
