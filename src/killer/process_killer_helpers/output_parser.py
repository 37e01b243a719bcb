"""Parse process-listing command output into pids."""

from __future__ import annotations

import csv
import logging
from typing import List

logger = logging.getLogger(__name__)

_TASKLIST_PID_COLUMN = 1


def parse_tasklist_csv(stdout: str) -> List[int]:
    """Extract pids from ``tasklist /FO CSV`` output.

    The first row is the header. Rows whose second field is not an integer
    (including the informational line printed when nothing matches) are skipped.
    """
    rows = csv.reader(stdout.strip().splitlines()[1:])
    pids: List[int] = []
    for row in rows:
        if len(row) <= _TASKLIST_PID_COLUMN:
            continue
        pid = _parse_pid(row[_TASKLIST_PID_COLUMN])
        if pid is not None:
            pids.append(pid)
    return pids


def parse_pgrep_lines(stdout: str) -> List[int]:
    """Extract pids from ``pgrep`` output, one pid per line."""
    pids: List[int] = []
    for line in stdout.splitlines():
        pid = _parse_pid(line)
        if pid is not None:
            pids.append(pid)
    return pids


def _parse_pid(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        logger.debug("Skipping non-numeric listing field %r", raw)
        return None
