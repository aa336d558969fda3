"""
Toolkit settings

Rendering and logging options, declared as a pydantic model and readable
from LAZYVIEWS_* environment variables.
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "LAZYVIEWS_"

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class ToolkitSettings(BaseModel):
    """Options shared by every view and cursor"""
    separator: str = Field(
        ", ",
        description="Separator placed between elements when rendering a sequence",
        min_length=1
    )
    null_text: str = Field(
        "None",
        description="Text rendered for None elements"
    )
    open_bracket: str = Field(
        "[",
        description="Text rendered before the first element"
    )
    close_bracket: str = Field(
        "]",
        description="Text rendered after the last element"
    )
    log_level: str = Field(
        "WARNING",
        description="Level applied by configure_logging()"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Accept any standard logging level name, case-insensitively"""
        level = v.strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"Invalid log level: {v}. Valid levels: {list(_LEVEL_NAMES)}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ToolkitSettings":
        """Build settings from LAZYVIEWS_SEPARATOR, LAZYVIEWS_NULL_TEXT and LAZYVIEWS_LOG_LEVEL"""
        environ = os.environ if environ is None else environ
        values = {}
        for field in ("separator", "null_text", "log_level"):
            key = ENV_PREFIX + field.upper()
            if key in environ:
                values[field] = environ[key]
        return cls(**values)


_settings: Optional[ToolkitSettings] = None


def get_settings() -> ToolkitSettings:
    """Current settings, loaded from the environment on first use"""
    global _settings
    if _settings is None:
        _settings = ToolkitSettings.from_env()
    return _settings


def configure(settings: Optional[ToolkitSettings] = None, **overrides) -> ToolkitSettings:
    """Install settings (or the current ones updated with overrides) and return them"""
    global _settings
    base = settings if settings is not None else get_settings()
    if overrides:
        base = ToolkitSettings(**{**base.model_dump(), **overrides})
    _settings = base
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None


def configure_logging(settings: Optional[ToolkitSettings] = None) -> None:
    """Apply the configured level to the root logger"""
    settings = settings or get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level))
    logging.getLogger("lazyviews").setLevel(settings.log_level)
