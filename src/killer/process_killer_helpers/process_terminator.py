"""Forcefully terminate a single pid."""

from __future__ import annotations

import logging

from ..errors import CommandExecutionError, TerminationError
from .command_runner import run_command
from .platform_strategy import PlatformStrategy

logger = logging.getLogger(__name__)


async def terminate(pid: int, *, strategy: PlatformStrategy) -> None:
    """
    Kill ``pid`` without giving it a chance to clean up.

    Raises:
        TerminationError: If the kill command fails (unknown pid, permission
                          denied, process already gone) or if ``pid`` is
                          not positive
    """
    if pid <= 0:
        # kill -9 0 signals the whole process group, this tool included
        raise TerminationError(pid, "not a valid process id")

    argv = strategy.build_kill_command(pid)
    try:
        result = await run_command(argv)
    except CommandExecutionError as exc:
        raise TerminationError(pid, str(exc)) from exc

    if result.returncode != 0:
        error = result.to_error()
        raise TerminationError(pid, str(error)) from error
    logger.debug("Kill command succeeded for PID %d", pid)
