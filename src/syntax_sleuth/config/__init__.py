"""Configuration loading and validation."""

from .loader import load_config
from .schema import (
    DisplayConfig,
    FileLoggingConfig,
    LanguageConfig,
    LoggingConfig,
    SearchConfig,
    SleuthConfig,
)

__all__ = [
    # Loader
    "load_config",
    # Root config
    "SleuthConfig",
    # Sections
    "LanguageConfig",
    "SearchConfig",
    "DisplayConfig",
    "LoggingConfig",
    "FileLoggingConfig",
]
