"""
Shared data schemas for the Backend and Frontend API services
"""

from .service import CamelModel, ServiceInfo, ErrorResponse

__all__ = [
    "CamelModel",
    "ServiceInfo",
    "ErrorResponse",
]

__version__ = "1.0.0"
