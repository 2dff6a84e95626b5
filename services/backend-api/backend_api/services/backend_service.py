"""
Backend Service
Sample data, text processing and placeholder health reporting
"""

import time
from datetime import timedelta
from typing import Optional

import structlog

from backend_api.models.backend import (
    DetailedHealth, Item, ProcessRequest, ProcessResult, SampleData
)
from backend_api.utils.config import BackendSettings
from shared.schemas.service import ServiceInfo, utc_now

logger = structlog.get_logger(__name__)

# (id, name, description, age in days)
SAMPLE_ITEMS = (
    (1, "Item 1", "First sample item", 5),
    (2, "Item 2", "Second sample item", 3),
    (3, "Item 3", "Third sample item", 1),
)

HEALTH_CHECKS = {
    "Database": "Connected",
    "Cache": "Running",
    "ExternalAPI": "Reachable",
}


class InvalidInputError(ValueError):
    """Raised when a process request carries no data"""


def format_uptime(seconds: float) -> str:
    """Format a duration as dd.hh:mm:ss"""
    total = int(seconds)
    days, remainder = divmod(total, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{days:02d}.{hours:02d}:{minutes:02d}:{secs:02d}"


class BackendService:
    """Handlers behind the /api/backend endpoints"""

    def __init__(self, settings: BackendSettings):
        self.settings = settings

    def get_service_info(self) -> ServiceInfo:
        info = ServiceInfo.collect(
            service=self.settings.service_name,
            version=self.settings.service_version,
            environment=self.settings.environment
        )
        logger.info("Info endpoint called", host_name=info.host_name)
        return info

    def get_sample_data(self) -> SampleData:
        now = utc_now()
        items = [
            Item(id=item_id, name=name, description=description, created_at=now - timedelta(days=age))
            for item_id, name, description, age in SAMPLE_ITEMS
        ]
        data = SampleData(items=items, total_count=len(items), generated_at=now)
        logger.info("Data endpoint called", count=data.total_count)
        return data

    def process_data(self, request: Optional[ProcessRequest]) -> ProcessResult:
        """
        Upper-case the request's data

        Raises:
            InvalidInputError: if the request is missing or its data is empty
        """
        if request is None or not request.data:
            raise InvalidInputError("Invalid request data")

        logger.info("Processing data", data=request.data)
        return ProcessResult(
            original_data=request.data,
            processed_data=request.data.upper()
        )

    def get_detailed_health(self) -> DetailedHealth:
        # Checks are static placeholders, not live probes
        return DetailedHealth(
            service=self.settings.service_name,
            uptime=format_uptime(time.monotonic()),
            checks=dict(HEALTH_CHECKS)
        )
