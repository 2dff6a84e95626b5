"""
Backend API - Main Application
Serves sample informational data
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
import structlog

from backend_api.routes import backend
from backend_api.routes.backend import invalid_request_response
from backend_api.services.backend_service import BackendService
from backend_api.utils.config import BackendSettings, get_settings
from shared.utils.http import install_common_handlers, root_payload
from shared.utils.logger import setup_logging

logger = structlog.get_logger(__name__)


def create_app(settings: Optional[BackendSettings] = None) -> FastAPI:
    """Build the Backend API application"""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan events"""
        logger.info(
            "Starting Backend API",
            environment=settings.environment,
            docs_enabled=settings.docs_enabled
        )
        yield
        logger.info("Backend API shutdown complete")

    app = FastAPI(
        title="Backend API",
        description="Sample data and processing endpoints",
        version=settings.service_version,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.backend_service = BackendService(settings)

    install_common_handlers(app, settings)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning("Rejected request body", url=str(request.url), error_count=len(exc.errors()))
        return invalid_request_response()

    # Register routes
    app.include_router(backend.router, prefix="/api/backend", tags=["Backend"])

    # Root endpoint
    @app.get("/")
    async def root():
        """Root endpoint"""
        return root_payload("backend-api", settings)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "backend_api.main:app",
        host=app.state.settings.host,
        port=app.state.settings.port,
        log_level=app.state.settings.log_level.lower()
    )
