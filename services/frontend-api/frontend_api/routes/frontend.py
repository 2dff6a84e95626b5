"""
Frontend API routes
Own service info plus relayed Backend API calls
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from frontend_api.models.frontend import BackendDataResponse, BackendStatusResponse
from frontend_api.utils.backend_client import (
    BackendServiceClient, OriginError, OriginSuccess, TransportFailure
)
from frontend_api.utils.config import FrontendSettings
from shared.schemas.service import ErrorResponse, ServiceInfo

router = APIRouter()

BACKEND_INFO_PATH = "/api/backend/info"
BACKEND_DATA_PATH = "/api/backend/data"


def get_backend_client(request: Request) -> BackendServiceClient:
    return request.app.state.backend_client


def get_frontend_settings(request: Request) -> FrontendSettings:
    return request.app.state.settings


def error_response(status_code: int, error: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error.model_dump(by_alias=True, exclude_none=True)
    )


@router.get("/info", response_model=ServiceInfo)
async def get_info(settings: FrontendSettings = Depends(get_frontend_settings)):
    """Service information"""
    return ServiceInfo.collect(
        service=settings.service_name,
        version=settings.service_version,
        environment=settings.environment
    )


@router.get(
    "/backend-status",
    response_model=BackendStatusResponse,
    response_model_exclude_none=True
)
async def get_backend_status(client: BackendServiceClient = Depends(get_backend_client)):
    """Report Backend API reachability; always answers 200"""
    result = await client.get(BACKEND_INFO_PATH)

    if isinstance(result, OriginSuccess):
        return BackendStatusResponse(
            status="Backend is reachable",
            backend_response=result.body,
            status_code=result.status_code
        )
    if isinstance(result, OriginError):
        return BackendStatusResponse(
            status="Backend returned error",
            status_code=result.status_code
        )
    return BackendStatusResponse(status="Cannot reach backend", error=result.message)


@router.get(
    "/data",
    response_model=BackendDataResponse,
    responses={500: {"model": ErrorResponse}}
)
async def get_data_from_backend(client: BackendServiceClient = Depends(get_backend_client)):
    """Relay Backend API sample data; origin error statuses are passed through"""
    result = await client.get(BACKEND_DATA_PATH)

    if isinstance(result, OriginSuccess):
        return BackendDataResponse(backend_data=result.body)
    if isinstance(result, OriginError):
        return error_response(result.status_code, ErrorResponse(error="Backend API returned an error"))
    if isinstance(result, TransportFailure):
        return error_response(
            500,
            ErrorResponse(error="Failed to fetch data from backend", details=result.message)
        )
    raise TypeError(f"Unexpected backend result: {result!r}")
