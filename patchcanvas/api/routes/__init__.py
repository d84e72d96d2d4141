"""
API routes initialization.

This module aggregates all router modules into a single API router.
"""

from fastapi import APIRouter

from patchcanvas.api.routes.diffs import router as diffs_router
from patchcanvas.api.routes.health import router as health_router
from patchcanvas.api.routes.repos import router as repos_router

api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(diffs_router, prefix="/api", tags=["diffs"])
api_router.include_router(repos_router, prefix="/api", tags=["repos"])
