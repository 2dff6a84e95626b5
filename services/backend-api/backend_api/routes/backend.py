"""
Backend API routes
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from backend_api.models.backend import DetailedHealth, ProcessRequest, ProcessResult, SampleData
from backend_api.services.backend_service import BackendService, InvalidInputError
from shared.schemas.service import ErrorResponse, ServiceInfo

router = APIRouter()


def get_backend_service(request: Request) -> BackendService:
    return request.app.state.backend_service


def invalid_request_response() -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error="Invalid request data").model_dump(by_alias=True, exclude_none=True)
    )


@router.get("/info", response_model=ServiceInfo)
async def get_info(service: BackendService = Depends(get_backend_service)):
    """Service information"""
    return service.get_service_info()


@router.get("/data", response_model=SampleData)
async def get_data(service: BackendService = Depends(get_backend_service)):
    """Fixed sample dataset"""
    return service.get_sample_data()


@router.post(
    "/process",
    response_model=ProcessResult,
    responses={400: {"model": ErrorResponse}}
)
async def process_data(
    payload: Optional[ProcessRequest] = Body(None),
    service: BackendService = Depends(get_backend_service)
):
    """Upper-case the submitted data"""
    try:
        return service.process_data(payload)
    except InvalidInputError:
        return invalid_request_response()


@router.get("/health/detailed", response_model=DetailedHealth)
async def detailed_health(service: BackendService = Depends(get_backend_service)):
    """Detailed health report with placeholder checks"""
    return service.get_detailed_health()
