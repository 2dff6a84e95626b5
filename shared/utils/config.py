"""
Configuration Management
Environment-based settings shared by the Backend and Frontend API services
"""

from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DOCS_ENVIRONMENTS = {"development", "dev"}


class ServiceSettings(BaseSettings):
    """Settings common to every service"""

    # Service info
    service_name: str = "Service"
    service_version: str = "1.0.0"
    environment: str = "Unknown"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"

    # CORS
    cors_origins: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("port")
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        if v.lower() not in ("console", "json"):
            raise ValueError("LOG_FORMAT must be 'console' or 'json'")
        return v.lower()

    @property
    def docs_enabled(self) -> bool:
        """Interactive API docs are only served in development environments"""
        return self.environment.lower() in DOCS_ENVIRONMENTS
