"""Platform-specific listing and termination commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, FrozenSet, List, Optional

from ..config import POSIX, WINDOWS, ConfigurationError
from .output_parser import parse_pgrep_lines, parse_tasklist_csv
from .process_scan import scan_process_table

# pgrep exits 1 when no process matched
PGREP_NO_MATCH_EXIT_CODE = 1


@dataclass(frozen=True)
class PlatformStrategy:
    """Commands and parsers for one platform family, selected once at startup."""

    name: str
    build_list_command: Callable[[str], List[str]]
    build_kill_command: Callable[[int], List[str]]
    parse_listing: Callable[[str], List[int]]
    no_match_exit_codes: FrozenSet[int] = frozenset()
    fallback_scan: Optional[Callable[[str], List[int]]] = None


def _tasklist_command(name: str) -> List[str]:
    return ["tasklist", "/FI", f"IMAGENAME eq {name}*", "/FO", "CSV"]


def _taskkill_command(pid: int) -> List[str]:
    return ["taskkill", "/PID", str(pid), "/F"]


def _pgrep_command(name: str) -> List[str]:
    return ["pgrep", "-f", "--", name]


def _kill_command(pid: int) -> List[str]:
    return ["kill", "-9", str(pid)]


WINDOWS_STRATEGY = PlatformStrategy(
    name=WINDOWS,
    build_list_command=_tasklist_command,
    build_kill_command=_taskkill_command,
    parse_listing=parse_tasklist_csv,
)

POSIX_STRATEGY = PlatformStrategy(
    name=POSIX,
    build_list_command=_pgrep_command,
    build_kill_command=_kill_command,
    parse_listing=parse_pgrep_lines,
    no_match_exit_codes=frozenset({PGREP_NO_MATCH_EXIT_CODE}),
    fallback_scan=scan_process_table,
)

_STRATEGIES = {strategy.name: strategy for strategy in (WINDOWS_STRATEGY, POSIX_STRATEGY)}


def select_strategy(platform_name: str) -> PlatformStrategy:
    """Return the strategy for ``platform_name`` (``windows`` or ``posix``)."""
    try:
        return _STRATEGIES[platform_name]
    except KeyError as exc:
        raise ConfigurationError.invalid_value("platform", platform_name, f"Expected one of {sorted(_STRATEGIES)}") from exc
