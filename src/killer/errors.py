"""Error types raised by the process killer."""

from __future__ import annotations

from typing import Sequence


class CommandExecutionError(RuntimeError):
    """Raised when an external command exits non-zero or cannot be started."""

    def __init__(
        self,
        argv: Sequence[str],
        returncode: int | None,
        stderr: str = "",
        *,
        executable_missing: bool = False,
    ) -> None:
        self.argv = tuple(argv)
        self.returncode = returncode
        self.stderr = stderr
        self.executable_missing = executable_missing
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        command = " ".join(self.argv)
        if self.returncode is None:
            msg = f"Command could not be started: {command}"
        else:
            msg = f"Command exited with status {self.returncode}: {command}"
        detail = self.stderr.strip()
        if detail:
            msg += f" ({detail})"
        return msg

    @classmethod
    def not_started(cls, argv: Sequence[str], exc: OSError) -> "CommandExecutionError":
        """Create error for a command whose executable could not be launched."""
        return cls(argv, None, str(exc), executable_missing=isinstance(exc, FileNotFoundError))


class ResolutionError(RuntimeError):
    """Raised when the process listing fails for a reason other than no matches."""

    def __init__(self, name: str, reason: str = "") -> None:
        msg = f"Failed to list processes matching {name!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
        self.name = name


class TerminationError(RuntimeError):
    """Raised when the termination command rejects a pid."""

    def __init__(self, pid: int, reason: str = "") -> None:
        msg = f"Failed to terminate PID {pid}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
        self.pid = pid


class UsageError(ValueError):
    """Raised when the command line carries no targets."""

    @classmethod
    def no_targets(cls, program: str = "killer") -> "UsageError":
        """Create error for an invocation without any process tokens."""
        return cls(f"usage: {program} <processName|pid> [<processName|pid> ...]")


class UnexpectedError(RuntimeError):
    """Raised when a failure escapes per-target isolation."""


__all__ = [
    "CommandExecutionError",
    "ResolutionError",
    "TerminationError",
    "UnexpectedError",
    "UsageError",
]
