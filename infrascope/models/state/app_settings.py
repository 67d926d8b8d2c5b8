"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from infrascope.constants.defaults import (
    API_BASE_URL_DEFAULT,
    APP_NAME_DEFAULT,
    LOG_LEVEL_DEFAULT,
    PAGE_SIZE_DEFAULT,
    USE_MOCK_DATA_DEFAULT,
)
from infrascope.constants.limits import (
    PAGE_SIZE_MAX,
    PAGE_SIZE_MIN,
    REFRESH_INTERVAL_MIN,
)
from infrascope.constants.timeouts import (
    API_REQUEST_TIMEOUT,
    CLOCK_REFRESH_INTERVAL,
    STATUS_REFRESH_INTERVAL,
    TIMESERIES_REFRESH_INTERVAL,
)


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    app_name: str = APP_NAME_DEFAULT

    # Data source
    api_base_url: str = API_BASE_URL_DEFAULT
    use_mock_data: bool = USE_MOCK_DATA_DEFAULT
    mock_data_path: str = ""  # empty: bundled sample payloads
    request_timeout: float = Field(default=API_REQUEST_TIMEOUT, gt=0)

    # UI preferences
    page_size: int = Field(default=PAGE_SIZE_DEFAULT, ge=PAGE_SIZE_MIN, le=PAGE_SIZE_MAX)
    status_refresh_interval: int = Field(default=STATUS_REFRESH_INTERVAL, ge=REFRESH_INTERVAL_MIN)
    timeseries_refresh_interval: int = Field(
        default=TIMESERIES_REFRESH_INTERVAL, ge=REFRESH_INTERVAL_MIN
    )
    clock_refresh_interval: int = Field(default=CLOCK_REFRESH_INTERVAL, ge=REFRESH_INTERVAL_MIN)

    # Diagnostics
    log_level: str = LOG_LEVEL_DEFAULT
    log_file: str = ""
    debug_mode: bool = False


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
