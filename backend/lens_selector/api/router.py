"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from lens_selector.api.health import router as health_router
from lens_selector.api.lenses import router as lenses_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Lens lookups
api_router.include_router(lenses_router, tags=["Lenses"])
