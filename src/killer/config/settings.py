from __future__ import annotations

"""Settings consumed by the process killer CLI."""


import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import ConfigurationError
from .runtime import env_bool, env_str

WINDOWS = "windows"
POSIX = "posix"
_KNOWN_PLATFORMS = (WINDOWS, POSIX)
_WINDOWS_SYS_PLATFORMS = ("win32", "cygwin")


@dataclass(frozen=True)
class KillerSettings:
    platform: str
    exclude_self: bool
    quiet: bool
    log_dir: Optional[Path]


def detect_platform(sys_platform: str | None = None) -> str:
    """Map ``sys.platform`` onto the platform family used for command selection."""
    current = sys.platform if sys_platform is None else sys_platform
    if current in _WINDOWS_SYS_PLATFORMS:
        return WINDOWS
    return POSIX


def load_settings() -> KillerSettings:
    platform = env_str("KILLER_PLATFORM")
    if platform is None:
        platform = detect_platform()
    else:
        platform = platform.lower()
        if platform not in _KNOWN_PLATFORMS:
            raise ConfigurationError.invalid_value("KILLER_PLATFORM", platform, f"Expected one of {list(_KNOWN_PLATFORMS)}")

    log_dir = env_str("KILLER_LOG_DIR")
    return KillerSettings(
        platform=platform,
        exclude_self=bool(env_bool("KILLER_EXCLUDE_SELF", or_value=True)),
        quiet=bool(env_bool("KILLER_QUIET", or_value=False)),
        log_dir=Path(log_dir).expanduser() if log_dir else None,
    )
