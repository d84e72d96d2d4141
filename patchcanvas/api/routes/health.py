"""
Health check endpoints.

These endpoints provide basic health and status information about the API.
"""

from fastapi import APIRouter, Depends

from patchcanvas import __version__
from patchcanvas.api.dependencies import get_settings
from patchcanvas.core.config import Settings

router = APIRouter()


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    """
    Simple health check endpoint.

    Returns status information about the API, including version and environment.
    """
    return {
        "status": "healthy",
        "message": "PatchCanvas API is running.",
        "version": __version__,
        "environment": settings.ENVIRONMENT,
    }
