"""Direct process-table scan used when the listing command is unavailable."""

from __future__ import annotations

import logging
import re
from typing import List, Sequence

import psutil

logger = logging.getLogger(__name__)


def _describe(cmdline: Sequence[str] | None, name: str | None) -> str:
    cmdline_str = " ".join(cmdline) if cmdline else ""
    if not cmdline_str and name:
        cmdline_str = str(name)
    return cmdline_str


def scan_process_table(pattern: str) -> List[int]:
    """Return pids whose command line (or name) matches the regex ``pattern``.

    Matching is a regex search, like ``pgrep -f``. process_iter fills in
    ``None`` for attributes that cannot be read.

    Raises:
        re.error: If ``pattern`` is not a valid regular expression
    """
    matcher = re.compile(pattern)
    pids: List[int] = []
    for proc in psutil.process_iter(["pid", "cmdline", "name"]):
        description = _describe(proc.info.get("cmdline"), proc.info.get("name"))
        if matcher.search(description):
            pids.append(proc.info["pid"])
    logger.debug("Process table scan for %r matched %d processes", pattern, len(pids))
    return pids
