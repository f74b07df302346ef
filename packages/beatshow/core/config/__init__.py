"""Configuration management for beatshow."""

from beatshow.core.config.loader import (
    configure_logging_from_config,
    detect_format,
    load_config,
    load_engine_config,
)
from beatshow.core.config.models import (
    DEFAULT_FORMAT_VERSION,
    ConfigBase,
    EngineConfig,
    LoggingConfig,
)

__all__ = [
    # Loaders
    "configure_logging_from_config",
    "detect_format",
    "load_config",
    "load_engine_config",
    # Models
    "DEFAULT_FORMAT_VERSION",
    "ConfigBase",
    "EngineConfig",
    "LoggingConfig",
]
