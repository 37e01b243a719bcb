"""Tests for the external command runner."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from killer.errors import CommandExecutionError
from killer.process_killer_helpers.command_runner import CommandResult, run_command


def _fake_process(returncode: int, stdout: bytes = b"", stderr: bytes = b"") -> MagicMock:
    proc = MagicMock()
    proc.returncode = returncode
    proc.communicate = AsyncMock(return_value=(stdout, stderr))
    return proc


class TestRunCommand:
    """Tests for run_command."""

    @pytest.mark.asyncio
    async def test_captures_output_and_status(self) -> None:
        """Returns decoded stdout/stderr along with the exit status."""
        proc = _fake_process(0, b"101\n202\n")
        with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=proc)) as spawn:
            result = await run_command(["pgrep", "-f", "--", "worker"])

        assert result == CommandResult(argv=("pgrep", "-f", "--", "worker"), returncode=0, stdout="101\n202\n", stderr="")
        spawn.assert_awaited_once_with(
            "pgrep",
            "-f",
            "--",
            "worker",
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )

    @pytest.mark.asyncio
    async def test_non_zero_status_is_returned(self) -> None:
        """A failing command is reported through the result, not raised."""
        proc = _fake_process(1, stderr=b"kill: (99) - No such process\n")
        with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=proc)):
            result = await run_command(["kill", "-9", "99"])

        assert result.returncode == 1
        assert "No such process" in result.stderr

    @pytest.mark.asyncio
    async def test_missing_executable_raises(self) -> None:
        """A command that cannot be started raises CommandExecutionError."""
        with patch("asyncio.create_subprocess_exec", AsyncMock(side_effect=FileNotFoundError("pgrep"))):
            with pytest.raises(CommandExecutionError) as exc_info:
                await run_command(["pgrep", "-f", "--", "worker"])

        assert exc_info.value.returncode is None
        assert exc_info.value.executable_missing is True
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    @pytest.mark.asyncio
    async def test_permission_error_is_not_missing_executable(self) -> None:
        with patch("asyncio.create_subprocess_exec", AsyncMock(side_effect=PermissionError("denied"))):
            with pytest.raises(CommandExecutionError) as exc_info:
                await run_command(["kill", "-9", "1"])

        assert exc_info.value.executable_missing is False


def test_to_error_carries_command_details():
    result = CommandResult(argv=("taskkill", "/PID", "5", "/F"), returncode=128, stdout="", stderr="ERROR: not found")

    error = result.to_error()

    assert error.argv == ("taskkill", "/PID", "5", "/F")
    assert error.returncode == 128
    assert "ERROR: not found" in str(error)
