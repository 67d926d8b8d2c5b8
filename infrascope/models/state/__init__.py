"""Application state models."""

from infrascope.models.state.app_settings import AppSettings, ConfigError, ConfigLoadError
from infrascope.models.state.config_manager import ConfigManager

__all__ = ["AppSettings", "ConfigError", "ConfigLoadError", "ConfigManager"]
