"""Config settings – 12-factor env-based configuration."""
from rotating_jwt.config.settings.base import AuthSettings, Settings
from rotating_jwt.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["AuthSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
