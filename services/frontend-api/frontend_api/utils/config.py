"""
Frontend API configuration
"""

from typing import Optional

from pydantic import field_validator

from shared.utils.config import ServiceSettings


class FrontendSettings(ServiceSettings):
    """Settings for the Frontend API"""

    service_name: str = "Frontend API"

    # Backend API (Kubernetes service DNS)
    backend_api_url: str = "http://backend-api-svc"

    @field_validator("backend_api_url")
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.rstrip("/")


_settings: Optional[FrontendSettings] = None


def get_settings() -> FrontendSettings:
    """Get Frontend API settings, read from the environment on first use"""
    global _settings
    if _settings is None:
        _settings = FrontendSettings()
    return _settings
