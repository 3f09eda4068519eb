"""
Cubify Stats API

FastAPI application for federation competitor rankings and comparisons.
"""

from contextlib import asynccontextmanager
import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cubify import __version__
from cubify.config import settings
from cubify.api.v1.router import api_router
from cubify.features.federation import FederationClient


# === Logging Setup ===
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)


# === Lifespan ===
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting Cubify Stats API...")
    app.state.federation_client = FederationClient()
    logger.info(f"Federation API: {settings.federation_api_url}")

    yield

    await app.state.federation_client.close()
    logger.info("Shutting down...")


# === App Creation ===
app = FastAPI(
    title="Cubify Stats API",
    description="Personal records, rankings and percentiles for WCA competitors",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# === Middleware ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# === Routes ===
app.include_router(api_router, prefix="/api/v1")


# === Health Check ===
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
