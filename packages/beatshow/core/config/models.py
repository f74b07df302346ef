"""Configuration models for beatshow."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_FORMAT_VERSION = "3.3.0"


class ConfigBase(BaseModel):
    """Base class for all beatshow configurations.

    Provides common functionality for loading from files with defaults.
    Subclasses must implement default_path() to specify their default location.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type.

        Subclasses must override this to provide their default location.

        Returns:
            Path to the default config file
        """
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from path, or from the default path when it exists.

        Args:
            path: Path to config file, or None to use default

        Returns:
            Loaded config instance, all defaults if no path was given and
            the default file does not exist

        Raises:
            FileNotFoundError: If an explicit config file doesn't exist
            ValidationError: If config is invalid
        """
        from beatshow.core.config.loader import load_config

        if path is None:
            path = cls.default_path()
            if not path.exists():
                return cls()
        raw = load_config(path)
        return cls.model_validate(raw)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file; None logs to stdout")


class EngineConfig(ConfigBase):
    """Engine-level configuration."""

    default_format_version: str = Field(
        default=DEFAULT_FORMAT_VERSION,
        pattern=r"^\d+(\.\d+)*$",
        description="Format version assumed for documents without a version key",
    )
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for engine config."""
        return Path("beatshow.yaml")
