"""Resolve a process name token into running pids."""

from __future__ import annotations

import asyncio
import logging
import re
from typing import List, Optional

from ..errors import CommandExecutionError, ResolutionError
from .command_runner import run_command
from .platform_strategy import PlatformStrategy
from .process_filter import filter_pids

logger = logging.getLogger(__name__)


async def resolve(name: str, *, strategy: PlatformStrategy, exclude_pid: Optional[int] = None) -> List[int]:
    """
    List running processes matching ``name``.

    Every call runs the listing command again. An empty list means nothing
    matched and is not an error. Pids keep the order the listing emitted.

    Raises:
        ResolutionError: If the listing command fails for any reason other
                         than reporting no matches
    """
    argv = strategy.build_list_command(name)
    try:
        result = await run_command(argv)
    except CommandExecutionError as exc:
        if not (exc.executable_missing and strategy.fallback_scan is not None):
            raise ResolutionError(name, str(exc)) from exc
        logger.debug("%s is not installed; scanning the process table directly", argv[0])
        try:
            pids = await asyncio.to_thread(strategy.fallback_scan, name)
        except re.error as pattern_exc:
            raise ResolutionError(name, f"invalid pattern: {pattern_exc}") from pattern_exc
    else:
        if result.returncode in strategy.no_match_exit_codes:
            return []
        if result.returncode != 0:
            error = result.to_error()
            raise ResolutionError(name, str(error)) from error
        pids = strategy.parse_listing(result.stdout)

    return filter_pids(pids, exclude_pid)
