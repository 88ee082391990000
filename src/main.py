import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from src.core import exceptions
from src.core.config import settings
from src.core.database import Database
from src.core.log_config import configure_logging
from src.core.response.handlers import (
    global_exception_handler,
    service_exception_handler,
    validation_exception_handler,
)

# Import routers from apps
from src.apps.blog import author_router, post_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    database: Database = app.state.database
    # Startup: Create database tables
    await database.create_tables()
    await database.ping()
    logger.info("Database connection successful")
    yield
    # Shutdown: Clean up resources
    logger.info("Shutting down...")
    await database.disconnect()


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Create the FastAPI app around an explicit database."""
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_INFO,
        version=settings.PROJECT_VERSION,
        lifespan=lifespan,
    )
    app.state.database = database or Database.from_settings()

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore
    app.add_exception_handler(exceptions.ServiceException, service_exception_handler)  # type: ignore
    app.add_exception_handler(Exception, global_exception_handler)

    # Health check endpoint
    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint with health check."""
        return {"message": "Server is running", "status": "healthy", "version": settings.PROJECT_VERSION}

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "message": "Service is running normally"}

    # Include app routers
    app.include_router(author_router)
    app.include_router(post_router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload in development
        log_level="info",
    )
