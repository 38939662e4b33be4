"""FastAPI application entry point for the LinkedIn bridge."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.stores import Stores
from app.routers import linkedin_router, user_data_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Handles startup and shutdown events.
    """
    # Startup
    logger.info("Starting LinkedIn bridge...")
    Stores.open()
    logger.info("LinkedIn bridge started successfully")

    yield

    # Shutdown
    logger.info("Shutting down LinkedIn bridge...")
    Stores.close()
    logger.info("LinkedIn bridge shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Sign in with LinkedIn and hand the profile to the frontend",
        version="1.0.0",
        lifespan=lifespan,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Include routers
    app.include_router(linkedin_router, prefix="/api")
    app.include_router(user_data_router, prefix="/api")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        try:
            return {
                "status": "healthy",
                "pending_states": len(Stores.get_state_registry()),
                "sessions": len(Stores.get_session_store()),
            }
        except RuntimeError as e:
            return {
                "status": "unhealthy",
                "error": str(e),
            }

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
