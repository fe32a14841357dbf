"""FitTracker API - Main Application."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fittracker.config import Settings, get_settings
from fittracker.errors import FitTrackerError
from fittracker.repositories import build_store
from fittracker.routes import (
    auth_router,
    profile_router,
    workouts_router,
    nutrition_router,
    progress_router,
    dashboard_router,
)
from fittracker.seed import seed_demo_data
from fittracker.services.auth_service import AuthService

# Configure logging
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings: Settings = app.state.settings
    store = app.state.store

    # Startup
    logger.info(f"Starting {settings.app_name} ({settings.storage_backend} storage)...")
    await store.open()
    if settings.seed_demo_data:
        await seed_demo_data(store, app.state.auth_service)
    yield
    # Shutdown
    await store.close()
    logger.info(f"Shutting down {settings.app_name}...")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="""
        FitTracker API - workouts, nutrition, body-composition progress and dashboard stats.

        ## Authentication
        All endpoints except /api/auth/* require a token from login or registration:
        `Authorization: Bearer <token>`
        """,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Per-application state shared by the routers
    app.state.settings = settings
    app.state.store = build_store(settings)
    app.state.auth_service = AuthService(settings)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(FitTrackerError)
    async def fittracker_exception_handler(request: Request, exc: FitTrackerError):
        """Render domain errors as {"error": message}."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Render rejected input in the same {"error": message} shape."""
        problems = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=422,
            content={"error": "; ".join(problems) or "Invalid request"},
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )

    # Include routers
    app.include_router(auth_router, prefix="/api")
    app.include_router(profile_router, prefix="/api")
    app.include_router(workouts_router, prefix="/api")
    app.include_router(nutrition_router, prefix="/api")
    app.include_router(progress_router, prefix="/api")
    app.include_router(dashboard_router, prefix="/api")

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.app_version,
        }

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "fittracker.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
