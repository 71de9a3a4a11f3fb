"""YAML configuration loader for filter templates.

Loads and caches filter template definitions from YAML with a fallback to the
built-in orders template. A template file looks like:

    templates:
      orders:
        defaults:
          name: ""
          age: 0
          is_paid: false
          statuses: []        # lists become sets
        options:
          statuses: [completed, canceled, delivered]
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
from functools import lru_cache
import yaml

from query_filters.template import DefaultTemplate

from .logging_config import get_logger
from .settings import config

# Get config directory
CONFIG_DIR = Path(__file__).parent

logger = get_logger("config_loader")


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""

    pass


FALLBACK_FILTER_CONFIG: Dict[str, Any] = {
    "templates": {
        "orders": {
            "defaults": {"name": "", "age": 0, "is_paid": False, "statuses": []},
            "options": {"statuses": ["completed", "canceled", "delivered"]},
        }
    }
}


def _load_yaml_file(filename: str, config_dir: Path = CONFIG_DIR) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of YAML file in the config directory
        config_dir: Directory to read from

    Returns:
        Parsed YAML content as dictionary

    Raises:
        ConfigurationError: If file cannot be loaded
    """
    filepath = Path(config_dir) / filename
    if not filepath.exists():
        raise ConfigurationError(f"Configuration file not found: {filepath}")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error parsing {filename}: {e}")
    except IOError as e:
        raise ConfigurationError(f"Error reading {filename}: {e}")

    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {filename}")
    return data


@lru_cache(maxsize=4)
def load_filter_config(filename: Optional[str] = None) -> Dict[str, Any]:
    """Load the filter template file, falling back to the built-in templates."""
    filename = filename or config.filters.template_file
    try:
        return _load_yaml_file(filename)
    except ConfigurationError as e:
        logger.warning(f"{e}; using built-in filter templates")
        return FALLBACK_FILTER_CONFIG


def clear_config_cache() -> None:
    """Clear all cached configuration data."""
    load_filter_config.cache_clear()


def _to_default(value: Any) -> Any:
    # YAML has no set literal in safe mode; lists stand in for sets
    if isinstance(value, list):
        return set(value)
    return value


def _get_template_section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    templates = data.get("templates") or {}
    if name not in templates:
        raise ConfigurationError(
            f"Unknown filter template {name!r}. Available: {sorted(templates)}"
        )
    return templates[name] or {}


def build_filter_template(data: Dict[str, Any], name: str) -> DefaultTemplate:
    """
    Build a DefaultTemplate from parsed configuration.

    Raises:
        ConfigurationError: If the template is missing.
        UnsupportedType: If a default value cannot be used as a filter value.
    """
    section = _get_template_section(data, name)
    defaults = section.get("defaults") or {}
    return DefaultTemplate({str(key): _to_default(value) for key, value in defaults.items()})


def load_filter_template(name: Optional[str] = None) -> DefaultTemplate:
    """Load a named filter template from the configured YAML file."""
    return build_filter_template(load_filter_config(), name or config.filters.default_template)


def get_option_values(name: str, key: str, data: Optional[Dict[str, Any]] = None) -> List[Any]:
    """
    Get the selectable values for a set filter (e.g. order statuses).

    Returns:
        List of option values, empty if none are configured.
    """
    data = data if data is not None else load_filter_config()
    section = _get_template_section(data, name)
    return list((section.get("options") or {}).get(key, []))
