"""
Backend API configuration
"""

from typing import Optional

from shared.utils.config import ServiceSettings


class BackendSettings(ServiceSettings):
    """Settings for the Backend API"""

    service_name: str = "Backend API"


_settings: Optional[BackendSettings] = None


def get_settings() -> BackendSettings:
    """Get Backend API settings, read from the environment on first use"""
    global _settings
    if _settings is None:
        _settings = BackendSettings()
    return _settings
