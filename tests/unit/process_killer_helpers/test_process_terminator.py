"""Tests for process terminator module."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from killer.errors import CommandExecutionError, TerminationError
from killer.process_killer_helpers.platform_strategy import POSIX_STRATEGY, WINDOWS_STRATEGY
from killer.process_killer_helpers.process_terminator import terminate
from tests.helpers.process_killer_test_helper import command_result

RUN_COMMAND = "killer.process_killer_helpers.process_terminator.run_command"


class TestTerminate:
    """Tests for terminate function."""

    @pytest.mark.asyncio
    async def test_sends_sigkill_on_posix(self) -> None:
        runner = AsyncMock(return_value=command_result(["kill", "-9", "1234"]))
        with patch(RUN_COMMAND, runner):
            await terminate(1234, strategy=POSIX_STRATEGY)

        runner.assert_awaited_once_with(["kill", "-9", "1234"])

    @pytest.mark.asyncio
    async def test_uses_taskkill_on_windows(self) -> None:
        runner = AsyncMock(return_value=command_result(["taskkill", "/PID", "1234", "/F"]))
        with patch(RUN_COMMAND, runner):
            await terminate(1234, strategy=WINDOWS_STRATEGY)

        runner.assert_awaited_once_with(["taskkill", "/PID", "1234", "/F"])

    @pytest.mark.asyncio
    async def test_non_zero_status_raises_termination_error(self) -> None:
        """A rejected kill surfaces as TerminationError with the command failure attached."""
        runner = AsyncMock(return_value=command_result(["kill", "-9", "99"], 1, stderr="No such process"))
        with patch(RUN_COMMAND, runner):
            with pytest.raises(TerminationError) as exc_info:
                await terminate(99, strategy=POSIX_STRATEGY)

        assert exc_info.value.pid == 99
        assert isinstance(exc_info.value.__cause__, CommandExecutionError)
        assert "No such process" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_unstartable_command_raises_termination_error(self) -> None:
        failure = CommandExecutionError(["kill", "-9", "5"], None, "permission denied")
        with patch(RUN_COMMAND, AsyncMock(side_effect=failure)):
            with pytest.raises(TerminationError) as exc_info:
                await terminate(5, strategy=POSIX_STRATEGY)

        assert exc_info.value.__cause__ is failure

    @pytest.mark.asyncio
    async def test_does_not_retry(self) -> None:
        runner = AsyncMock(return_value=command_result(["kill"], 1))
        with patch(RUN_COMMAND, runner):
            with pytest.raises(TerminationError):
                await terminate(7, strategy=POSIX_STRATEGY)

        assert runner.await_count == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("pid", [0, -1])
    async def test_rejects_non_positive_pid_without_running_a_command(self, pid) -> None:
        """kill -9 0 would signal our own process group, so it is never issued."""
        runner = AsyncMock(return_value=command_result(["kill"]))
        with patch(RUN_COMMAND, runner):
            with pytest.raises(TerminationError) as exc_info:
                await terminate(pid, strategy=POSIX_STRATEGY)

        assert exc_info.value.pid == pid
        assert "not a valid process id" in str(exc_info.value)
        runner.assert_not_awaited()
