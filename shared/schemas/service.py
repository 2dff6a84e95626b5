"""
Service data schemas shared by the Backend and Frontend APIs

Pydantic models serialised with camelCase keys on the wire.
"""

import socket
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Current time as an aware UTC datetime, serialised with a trailing Z"""
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """Base model emitting camelCase JSON keys"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True
    )


class ServiceInfo(CamelModel):
    """Informational payload returned by each service's info endpoint"""
    service: str
    version: str
    environment: str
    timestamp: datetime = Field(default_factory=utc_now)
    host_name: str = Field(default_factory=socket.gethostname)

    @classmethod
    def collect(cls, service: str, version: str, environment: Optional[str]) -> "ServiceInfo":
        """Build info for the running process"""
        return cls(
            service=service,
            version=version,
            environment=environment or "Unknown"
        )


class ErrorResponse(CamelModel):
    """Structured error body"""
    error: str
    details: Optional[str] = None
