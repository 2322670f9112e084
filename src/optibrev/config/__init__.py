"""Config – 12-factor env-based configuration."""
from optibrev.config.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from optibrev.config.settings import LOG_LEVELS, OptibrevSettings, Settings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "LOG_LEVELS",
    "OptibrevSettings",
    "Settings",
    "SettingsLoader",
]
