"""Config – token settings, env loader and validation errors."""

from rotating_jwt.config.settings import AuthSettings, EnvSettingsLoader, Settings, SettingsLoader
from rotating_jwt.config.tokens import (
    DEFAULT_ACCESS_TOKEN_EXPIRY,
    DEFAULT_CREDENTIALS_LIMIT,
    DEFAULT_REFRESH_TOKEN_EXPIRY,
    AuthConfig,
    TokenConfig,
    normalize_limit,
)
from rotating_jwt.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "DEFAULT_ACCESS_TOKEN_EXPIRY",
    "DEFAULT_CREDENTIALS_LIMIT",
    "DEFAULT_REFRESH_TOKEN_EXPIRY",
    "AuthConfig",
    "AuthSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "TokenConfig",
    "normalize_limit",
]
