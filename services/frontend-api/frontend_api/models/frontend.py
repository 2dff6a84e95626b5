"""
Frontend API models
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from shared.schemas.service import CamelModel, utc_now


class BackendStatusResponse(CamelModel):
    """Reachability report for the Backend API"""
    status: str
    backend_response: Optional[str] = None
    status_code: Optional[int] = None
    error: Optional[str] = None


class BackendDataResponse(CamelModel):
    """Backend API data relayed by the Frontend API"""
    source: str = "Frontend API"
    backend_data: str
    retrieved_at: datetime = Field(default_factory=utc_now)
