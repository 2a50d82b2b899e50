import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from dispatch.db.base import Base
from dispatch.db.session import engine
from dispatch.core.config import settings
from dispatch.core.errors import register_exception_handlers
from dispatch.api.v1.api import api_router, auth_router

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    # Startup
    logger.info("Starting application...")

    # Create database tables for development databases; alembic owns production
    Base.metadata.create_all(bind=engine)

    yield

    # Shutdown
    logger.info("Shutting down application...")
    engine.dispose()
    logger.info("Database connections closed")

# Create FastAPI app with lifespan events
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    debug=settings.DEBUG,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routers
app.include_router(api_router, prefix=settings.API_PREFIX)
app.include_router(auth_router)

# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.PROJECT_VERSION,
        "environment": settings.ENVIRONMENT,
        "debug": settings.DEBUG
    }
