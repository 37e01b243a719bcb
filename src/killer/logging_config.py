"""
Logging configuration for the killer CLI.

Progress and success lines go to stdout, warnings and failures go to
stderr. When a log directory is configured, a technical log file is
written alongside the console output.
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Optional

from killer.config import KillerSettings

_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_UNKNOWN_LOGGER_NAME = "<unknown>"
LOG_FILE_NAME = "killer.log"
_TECHNICAL_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_TECHNICAL_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _BelowLevelFilter(logging.Filter):
    """Pass only records strictly below ``level``."""

    def __init__(self, level: int) -> None:
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def _close_handlers(logger: logging.Logger, logger_name: Optional[str] = None) -> None:
    """Close all handlers for a logger, logging any errors."""
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:
            safe_name = logger_name if logger_name else _UNKNOWN_LOGGER_NAME
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", safe_name, e)


def _reset_root_handlers(root_logger: logging.Logger) -> None:
    _close_handlers(root_logger)
    root_logger.handlers = []


def _build_stdout_handler(quiet: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.addFilter(_BelowLevelFilter(logging.WARNING))
    handler.setLevel(logging.CRITICAL + 1 if quiet else logging.INFO)
    return handler


def _build_stderr_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(logging.WARNING)
    return handler


def _configure_file_handler(log_dir: Optional[Path]) -> Optional[logging.Handler]:
    if log_dir is None:
        return None

    log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME, mode="a")
    file_handler.setFormatter(logging.Formatter(_TECHNICAL_FORMAT, _TECHNICAL_DATEFMT))
    file_handler.setLevel(logging.DEBUG)
    return file_handler


def setup_logging(settings: KillerSettings) -> None:
    """Configure root logging for a killer run."""

    with _config_lock:
        root_logger = logging.getLogger()
        _reset_root_handlers(root_logger)

        root_logger.addHandler(_build_stdout_handler(settings.quiet))
        root_logger.addHandler(_build_stderr_handler())

        file_handler = _configure_file_handler(settings.log_dir)
        if file_handler:
            root_logger.addHandler(file_handler)

        root_logger.setLevel(logging.DEBUG if file_handler else logging.INFO)
        logging.getLogger("asyncio").setLevel(logging.WARNING)
