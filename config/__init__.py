"""Configuration module for query filters."""

from .settings import config, AppConfig, FilterConfig, Config
from .logging_config import setup_logging, get_logger

__all__ = [
    # Settings
    "config",
    "AppConfig",
    "FilterConfig",
    "Config",
    # Logging
    "setup_logging",
    "get_logger",
]
