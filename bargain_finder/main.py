"""
FastAPI main application for Bargain Finder.
"""

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from bargain_finder import __version__
from bargain_finder.config import get_settings

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    logger.info("Starting Bargain Finder API...")
    if not get_settings().api_key_configured:
        logger.warning("REPLIERS_API_KEY is not set; property searches will fail")

    yield

    logger.info("Shutting down Bargain Finder API...")


app = FastAPI(
    title="Bargain Finder API",
    description="Ontario real-estate listings tagged with bargain criteria",
    version=__version__,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": __version__
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Bargain Finder API",
        "docs": "/docs",
        "health": "/health",
        "properties": "/api/properties"
    }


# Import and include routers
from bargain_finder.routers import properties

app.include_router(properties.router, prefix="/api", tags=["properties"])
