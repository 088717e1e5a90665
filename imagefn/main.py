"""FastAPI application for the image metadata function."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from imagefn.api import images
from imagefn.config import get_settings
from imagefn.utils.logging import setup_logging

settings = get_settings()

# Set up logging before creating the app
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup and shutdown tasks."""
    logger.info("Starting image metadata function", extra={"version": settings.api_version})
    yield
    logger.info("Shutting down image metadata function")


app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description=settings.api_description,
    lifespan=lifespan,
)


@app.get("/")
async def root():
    """Root endpoint with function information."""
    return {
        "name": settings.api_title,
        "version": settings.api_version,
        "status": "operational",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "environment": settings.environment,
    }


app.include_router(images.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "imagefn.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )
