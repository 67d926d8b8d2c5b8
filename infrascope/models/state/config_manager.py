"""Settings loading from YAML and environment overrides."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from infrascope.constants.values import CONFIG_ENV_VAR, ENV_PREFIX
from infrascope.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
)

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}

# Environment variable suffix -> settings field
_ENV_OVERRIDES: dict[str, str] = {
    "API_BASE_URL": "api_base_url",
    "USE_MOCK_DATA": "use_mock_data",
    "MOCK_DATA_PATH": "mock_data_path",
    "DEBUG_MODE": "debug_mode",
    "LOG_LEVEL": "log_level",
}
_BOOL_FIELDS = {"use_mock_data", "debug_mode"}


class ConfigManager:
    """Loads AppSettings from a YAML file, then applies environment overrides."""

    DEFAULT_PATH = Path("~/.config/infrascope/settings.yaml")

    @classmethod
    def config_path(cls) -> Path:
        """Resolve the settings file location."""
        override = os.environ.get(CONFIG_ENV_VAR)
        return Path(override).expanduser() if override else cls.DEFAULT_PATH.expanduser()

    @classmethod
    def load(
        cls,
        path: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> AppSettings:
        """Load settings.

        Args:
            path: Explicit settings file; defaults to ``config_path()``.
            environ: Environment mapping used for overrides (``os.environ``
                when omitted).

        Returns:
            Validated settings. A missing file yields defaults.

        Raises:
            ConfigLoadError: If the file is unreadable, not a mapping, or
                fails validation.
        """
        settings_path = path or cls.config_path()
        raw: dict[str, Any] = {}
        if settings_path.exists():
            raw = cls._read_yaml(settings_path)
        else:
            logger.debug("Settings file %s not found, using defaults", settings_path)

        raw.update(cls._env_overrides(os.environ if environ is None else environ))
        try:
            return AppSettings.model_validate(raw)
        except ValidationError as e:
            raise ConfigLoadError(f"Invalid settings in {settings_path}: {e}") from e

    @staticmethod
    def _read_yaml(settings_path: Path) -> dict[str, Any]:
        try:
            data = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Failed to read settings from {settings_path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigLoadError(f"Settings file {settings_path} must contain a mapping")
        return data

    @staticmethod
    def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
        overrides: dict[str, Any] = {}
        for suffix, field_name in _ENV_OVERRIDES.items():
            value = environ.get(f"{ENV_PREFIX}{suffix}")
            if value is None:
                continue
            if field_name in _BOOL_FIELDS:
                overrides[field_name] = value.strip().lower() in _TRUE_VALUES
            else:
                overrides[field_name] = value
        return overrides


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
]
