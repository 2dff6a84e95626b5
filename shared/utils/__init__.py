"""
Shared utilities for the Backend and Frontend API services

This package contains common utilities used by both services.
"""

from .config import ServiceSettings
from .logger import setup_logging

__all__ = [
    "ServiceSettings",
    "setup_logging",
]

__version__ = "1.0.0"
