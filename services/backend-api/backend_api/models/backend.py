"""
Backend API models
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field, model_validator

from shared.schemas.service import CamelModel, utc_now


class Item(CamelModel):
    """Sample item"""
    id: int
    name: str
    description: str
    created_at: datetime


class SampleData(CamelModel):
    """Sample dataset response"""
    items: List[Item]
    total_count: int
    generated_at: datetime = Field(default_factory=utc_now)
    source: str = "Backend API Database"


class ProcessRequest(CamelModel):
    """Data processing request"""
    data: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def match_keys_case_insensitively(cls, values):
        if isinstance(values, dict):
            return {key.lower() if isinstance(key, str) else key: value for key, value in values.items()}
        return values


class ProcessResult(CamelModel):
    """Data processing result"""
    original_data: str
    processed_data: str
    processed_at: datetime = Field(default_factory=utc_now)
    processing_time: str = "5ms"
    status: str = "Success"


class DetailedHealth(CamelModel):
    """Detailed health report"""
    status: str = "Healthy"
    service: str
    uptime: str
    checks: Dict[str, str]
    timestamp: datetime = Field(default_factory=utc_now)
