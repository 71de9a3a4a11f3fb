"""Application settings and configuration."""

from pathlib import Path
from dataclasses import dataclass, field
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in _TRUE_VALUES


@dataclass
class AppConfig:
    """Application configuration settings."""

    name: str = field(default_factory=lambda: os.getenv("APP_NAME", "Query Filters"))
    version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_to_file: bool = field(default_factory=lambda: _env_flag("LOG_TO_FILE"))


@dataclass
class FilterConfig:
    """Filter session settings."""

    # Decode string filters as raw text instead of by shape ("true" stays a string)
    typed_decoding: bool = field(
        default_factory=lambda: _env_flag("QF_TYPED_DECODING")
    )
    template_file: str = field(
        default_factory=lambda: os.getenv("QF_TEMPLATE_FILE", "filters.yaml")
    )
    default_template: str = field(
        default_factory=lambda: os.getenv("QF_DEFAULT_TEMPLATE", "orders")
    )


@dataclass
class Config:
    """Main configuration container."""

    app: AppConfig = field(default_factory=AppConfig)
    filters: FilterConfig = field(default_factory=FilterConfig)


# Global config instance
config = Config()
