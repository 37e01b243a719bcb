"""Run external commands without a shell and capture their output."""

from __future__ import annotations

import asyncio
import locale
import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from ..errors import CommandExecutionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    argv: Tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def to_error(self) -> CommandExecutionError:
        return CommandExecutionError(self.argv, self.returncode, self.stderr)


def _decode(payload: bytes) -> str:
    return payload.decode(locale.getpreferredencoding(False), errors="replace")


async def run_command(argv: Sequence[str]) -> CommandResult:
    """
    Execute ``argv`` and wait for it to exit.

    A non-zero exit status is returned, not raised; callers decide which
    statuses are failures.

    Raises:
        CommandExecutionError: If the executable cannot be started
    """
    logger.debug("Running command: %s", " ".join(argv))
    try:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as exc:
        raise CommandExecutionError.not_started(argv, exc) from exc

    stdout, stderr = await proc.communicate()
    returncode = proc.returncode if proc.returncode is not None else -1
    logger.debug("Command exited with status %s: %s", returncode, " ".join(argv))
    return CommandResult(argv=tuple(argv), returncode=returncode, stdout=_decode(stdout), stderr=_decode(stderr))
