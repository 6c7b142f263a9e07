"""
Main FastAPI application setup.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wordwise.config import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown logging."""
    logger.info(f"🚀 {settings.app_name} starting up...")
    logger.info(f"📦 Version: {settings.build_version}")
    logger.info(f"🔗 Build: {settings.build_timestamp}")

    yield

    logger.info("🔄 Shutting down application...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Readability and vocabulary analysis for academic student writing",
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    register_exception_handlers(app)

    return app


def register_routes(app: FastAPI):
    """Register all application routes."""

    from .routes import feedback, readability, vocabulary

    app.include_router(readability.router, prefix="/api/analysis", tags=["readability"])
    app.include_router(vocabulary.router, prefix="/api/analysis", tags=["vocabulary"])
    app.include_router(feedback.router, prefix="/api/analysis", tags=["feedback"])

    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": settings.app_name,
            "version": settings.app_version,
            "build_version": settings.build_version,
            "build_timestamp": settings.build_timestamp,
        }


def register_exception_handlers(app: FastAPI):
    """Register global exception handlers."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Malformed bodies and parameters are client errors."""
        logger.error(f"Invalid request to {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=400,
            content={"detail": "Invalid request body", "errors": jsonable_errors(exc)},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled errors."""
        logger.error(f"Unhandled exception in {request.url}: {exc}", exc_info=True)

        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": str(exc) if settings.debug else "An unexpected error occurred",
                "path": str(request.url),
            },
        )


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


# Create the application instance
app = create_app()
