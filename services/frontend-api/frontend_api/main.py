"""
Frontend API - Main Application
Gateway that relays calls to the Backend API
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
import structlog

from frontend_api.routes import frontend
from frontend_api.utils.backend_client import BackendServiceClient
from frontend_api.utils.config import FrontendSettings, get_settings
from shared.utils.http import install_common_handlers, root_payload
from shared.utils.logger import setup_logging

logger = structlog.get_logger(__name__)


def create_app(
    settings: Optional[FrontendSettings] = None,
    backend_client: Optional[BackendServiceClient] = None
) -> FastAPI:
    """Build the Frontend API application"""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)

    client = backend_client or BackendServiceClient(base_url=settings.backend_api_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan events"""
        logger.info(
            "Starting Frontend API",
            environment=settings.environment,
            backend_api_url=client.base_url,
            docs_enabled=settings.docs_enabled
        )
        await client.start()

        yield

        await client.stop()
        logger.info("Frontend API shutdown complete")

    app = FastAPI(
        title="Frontend API",
        description="Gateway relaying requests to the Backend API",
        version=settings.service_version,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.backend_client = client

    install_common_handlers(app, settings)

    # Register routes
    app.include_router(frontend.router, prefix="/api/frontend", tags=["Frontend"])

    # Root endpoint
    @app.get("/")
    async def root():
        """Root endpoint"""
        return root_payload("frontend-api", settings)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "frontend_api.main:app",
        host=app.state.settings.host,
        port=app.state.settings.port,
        log_level=app.state.settings.log_level.lower()
    )
