"""
Logging utilities for the Backend/Frontend API services

Provides centralized logging configuration shared by both services:
stdlib logging via dictConfig with structlog layered on top.
"""

import os
import logging
import logging.config
from typing import Optional, Dict, Any

import structlog
import yaml

# Default logging configuration
DEFAULT_LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': '%(message)s',
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'INFO',
            'formatter': 'default',
            'stream': 'ext://sys.stdout'
        }
    },
    'loggers': {
        '': {
            'level': 'INFO',
            'handlers': ['console'],
        },
        'uvicorn.access': {
            'level': 'WARNING',
            'handlers': ['console'],
            'propagate': False
        }
    }
}


def load_logging_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a dictConfig mapping

    Args:
        config_path: Optional path to a YAML logging configuration file

    Returns:
        Logging configuration dictionary
    """
    if config_path and os.path.exists(config_path):
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
        if isinstance(config, dict):
            return config
        raise ValueError(f"Logging config at {config_path} is not a mapping")

    # Copy nested sections so overrides never leak into the defaults
    return {
        key: ({k: dict(v) for k, v in value.items()} if isinstance(value, dict) else value)
        for key, value in DEFAULT_LOGGING_CONFIG.items()
    }


def setup_logging(
    log_level: str = 'INFO',
    log_format: str = 'console',
    config_path: Optional[str] = None
) -> None:
    """
    Setup logging configuration

    Args:
        log_level: Log level applied to every configured logger and handler
        log_format: 'console' for human readable output, 'json' for JSON lines
        config_path: Path to a YAML logging configuration file
    """
    config = load_logging_config(config_path or os.getenv('LOGGING_CONFIG_PATH'))

    level = log_level.upper()
    for name, logger_config in config.get('loggers', {}).items():
        if name != 'uvicorn.access':
            logger_config['level'] = level
    for handler_config in config.get('handlers', {}).values():
        handler_config['level'] = level

    logging.config.dictConfig(config)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if log_format.lower() == 'json':
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    # Configure structured logging
    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

