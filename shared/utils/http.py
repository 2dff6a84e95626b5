"""
HTTP application helpers
Request logging, global error handling and the plain health probe used by both services
"""

import time

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
import structlog

from shared.utils.config import ServiceSettings

logger = structlog.get_logger(__name__)

health_router = APIRouter()


@health_router.get("/health", response_class=PlainTextResponse)
async def health_check():
    """Liveness probe"""
    return "Healthy"


async def log_requests(request: Request, call_next):
    """Log all incoming requests"""
    started = time.perf_counter()
    logger.info(
        "Request received",
        method=request.method,
        url=str(request.url),
        client_ip=request.client.host if request.client else "unknown"
    )

    response = await call_next(request)

    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 2)
    )

    return response


async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        method=request.method,
        url=str(request.url),
        exc_info=exc
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": "An unexpected error occurred"
        }
    )


def install_common_handlers(app: FastAPI, settings: ServiceSettings) -> None:
    """Attach CORS, request logging, the global exception handler and /health"""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)
    app.add_exception_handler(Exception, global_exception_handler)
    app.include_router(health_router, tags=["Health"])


def root_payload(service_slug: str, settings: ServiceSettings) -> dict:
    """Body of the root endpoint"""
    return {
        "service": service_slug,
        "version": settings.service_version,
        "status": "running",
        "docs": "/docs" if settings.docs_enabled else None
    }
