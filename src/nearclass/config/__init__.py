"""
Configuration management with typed Pydantic models.

Settings are read from YAML with environment variable interpolation.
"""

from nearclass.config.loader import load_config
from nearclass.config.settings import (
    AppConfig,
    DataConfig,
    DisplayConfig,
    LoggingConfig,
)

__all__ = [
    "AppConfig",
    "DataConfig",
    "DisplayConfig",
    "LoggingConfig",
    "load_config",
]
