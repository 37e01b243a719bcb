"""Environment-backed configuration for the process killer."""

from .errors import ConfigurationError
from .runtime import env_bool, env_str, reset_default_values
from .settings import POSIX, WINDOWS, KillerSettings, detect_platform, load_settings

__all__ = [
    "ConfigurationError",
    "KillerSettings",
    "POSIX",
    "WINDOWS",
    "detect_platform",
    "env_bool",
    "env_str",
    "load_settings",
    "reset_default_values",
]
