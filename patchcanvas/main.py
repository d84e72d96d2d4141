"""
Main FastAPI application module.

Initializes logging and the FastAPI application and mounts the API routers.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from patchcanvas import __version__
from patchcanvas.api.routes import api_router
from patchcanvas.core.logging_config import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    logger.info("Starting PatchCanvas API")
    yield
    logger.info("Shutting down PatchCanvas API")


def create_application() -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    application = FastAPI(
        title="PatchCanvas API",
        description="Unified-diff parsing for visual pull request review",
        version=__version__,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure this appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(api_router)

    return application


app = create_application()


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting PatchCanvas API server in development mode")
    uvicorn.run(
        "patchcanvas.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
