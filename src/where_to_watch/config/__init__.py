"""Configuration management module."""

from .config_manager import ConfigManager
from .models import Config, HistoryConfig, LoggingConfig, TMDbConfig

__all__ = [
    "ConfigManager",
    "Config",
    "TMDbConfig",
    "HistoryConfig",
    "LoggingConfig",
]
