"""
Process Killer

Terminate processes named on the command line. Each token is either a pid
(digits only) or a process name to resolve into zero or more pids. Tokens
and pids are handled strictly in order, and a failure on one never stops
the others.

Usage:
    killer notepad 1234 chrome
    python -m killer notepad
"""

from __future__ import annotations

import asyncio
import logging
import os
import re
import sys
from typing import List, Optional, Sequence

from .config import ConfigurationError, load_settings
from .errors import ResolutionError, TerminationError, UnexpectedError, UsageError
from .logging_config import setup_logging
from .process_killer_helpers.platform_strategy import PlatformStrategy, select_strategy
from .process_killer_helpers.process_discovery import resolve
from .process_killer_helpers.process_models import KillReport, PidOutcome, TokenOutcome
from .process_killer_helpers.process_terminator import terminate

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

_PID_TOKEN = re.compile(r"[0-9]+")


def is_pid_token(token: str) -> bool:
    """Return True when ``token`` is made only of decimal digits."""
    return _PID_TOKEN.fullmatch(token) is not None


async def kill_targets(
    tokens: Sequence[str],
    *,
    strategy: PlatformStrategy,
    exclude_pid: Optional[int] = None,
) -> KillReport:
    """
    Terminate every process named by ``tokens``.

    Args:
        tokens: Pids or process names, in command-line order
        strategy: Commands for the current platform
        exclude_pid: Pid dropped from every name resolution (usually our own)

    Returns:
        KillReport with one outcome per token

    Raises:
        UsageError: If ``tokens`` is empty
    """
    if not tokens:
        raise UsageError.no_targets()

    report = KillReport()
    for token in tokens:
        report.add(await _handle_token(token, strategy, exclude_pid))
    return report


async def _handle_token(token: str, strategy: PlatformStrategy, exclude_pid: Optional[int]) -> TokenOutcome:
    if is_pid_token(token):
        pid = int(token)
        logger.info("Terminating PID %d ...", pid)
        return TokenOutcome.from_pid_outcomes(token, [await _terminate_pid(pid, strategy)])

    try:
        pids = await resolve(token, strategy=strategy, exclude_pid=exclude_pid)
    except ResolutionError as exc:
        logger.error("Error while handling %r: %s", token, exc)
        return TokenOutcome.resolution_failed(token, exc)

    if not pids:
        logger.warning("Process %r not found", token)
        return TokenOutcome.not_found(token)

    logger.info("Found process %r PIDs: %s", token, ", ".join(str(pid) for pid in pids))
    pid_outcomes: List[PidOutcome] = []
    for pid in pids:
        pid_outcomes.append(await _terminate_pid(pid, strategy))
    return TokenOutcome.from_pid_outcomes(token, pid_outcomes)


async def _terminate_pid(pid: int, strategy: PlatformStrategy) -> PidOutcome:
    try:
        await terminate(pid, strategy=strategy)
    except TerminationError as exc:
        logger.error("Unable to terminate PID %d: %s", pid, exc)
        return PidOutcome(pid=pid, error=exc)
    logger.info("Terminated PID %d", pid)
    return PidOutcome(pid=pid)


def kill_targets_sync(
    tokens: Sequence[str],
    *,
    strategy: PlatformStrategy,
    exclude_pid: Optional[int] = None,
) -> KillReport:
    """Run :func:`kill_targets` on a fresh event loop.

    Raises:
        RuntimeError: If called while an event loop is already running.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None

    if loop is not None and loop.is_running():
        raise RuntimeError("kill_targets_sync cannot run inside an active event loop. Use the async kill_targets API instead.")

    return asyncio.run(kill_targets(tokens, strategy=strategy, exclude_pid=exclude_pid))


def _log_summary(report: KillReport) -> None:
    summary = report.summary()
    logger.info(
        "Done: %d targets, %d PIDs terminated, %d failed, %d not resolved",
        summary.tokens,
        summary.terminated,
        summary.failed,
        summary.unresolved,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point; returns the process exit status."""
    tokens = list(sys.argv[1:] if argv is None else argv)
    if not tokens:
        print(UsageError.no_targets(), file=sys.stderr)
        return EXIT_USAGE

    try:
        settings = load_settings()
        strategy = select_strategy(settings.platform)
    except ConfigurationError as exc:
        print(f"killer: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        setup_logging(settings)
    except OSError as exc:
        print(f"killer: cannot open log directory {settings.log_dir}: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    exclude_pid = os.getpid() if settings.exclude_self else None
    try:
        report = kill_targets_sync(tokens, strategy=strategy, exclude_pid=exclude_pid)
    except Exception as exc:  # top-level boundary: report and fail the run
        error = UnexpectedError(f"Unexpected failure: {exc}")
        logger.error("%s", error, exc_info=exc)
        return EXIT_FAILURE

    _log_summary(report)
    return EXIT_OK


__all__ = [
    "EXIT_FAILURE",
    "EXIT_OK",
    "EXIT_USAGE",
    "is_pid_token",
    "kill_targets",
    "kill_targets_sync",
    "main",
]
