"""
FastAPI Application Entry Point

This module initializes and configures the FastAPI application for the gap
similarity service. It sets up logging, CORS, and registers the API routes.

Responsibilities:
- Initialize FastAPI app with metadata
- Configure logging from settings
- Configure CORS for frontend communication
- Register API routers
- Health check endpoints

Lifecycle Management:
    The similarity engine is stateless and recomputed per request, so startup
    only configures logging and shutdown has nothing to release.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gaptracker import __version__
from gaptracker.config.settings import settings, configure_logging
from gaptracker.models.schemas import HealthCheckResponse
from gaptracker.routes import similarity

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown logic."""
    configure_logging()
    logger.info(
        f"Gap similarity service starting (threshold {settings.SIMILARITY_THRESHOLD}, "
        f"excluded statuses {settings.SIMILARITY_EXCLUDED_STATUSES})"
    )

    yield

    logger.info("Gap similarity service shutting down")


app = FastAPI(
    title="Gap Tracker Similarity Service",
    description="Finds previously reported process gaps similar to a new one",
    version=__version__,
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint - API health check"""
    return {
        "status": "healthy",
        "service": "Gap Tracker Similarity Service",
        "version": __version__
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Detailed health check endpoint."""
    return HealthCheckResponse(
        status="healthy",
        services={
            "api": "up",
            "similarity_engine": "up"
        }
    )


# Register API routes (using /api prefix to match frontend expectations)
app.include_router(similarity.router, prefix="/api", tags=["similarity"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
