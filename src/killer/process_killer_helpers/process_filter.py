"""Filter helpers for resolved pids."""

from __future__ import annotations

from typing import Iterable, List, Optional


def filter_pids(pids: Iterable[int], exclude_pid: Optional[int]) -> List[int]:
    """Drop duplicates and the excluded pid, preserving first-seen order."""
    seen = set()
    filtered: List[int] = []
    for pid in pids:
        if pid in seen or pid == exclude_pid:
            continue
        seen.add(pid)
        filtered.append(pid)
    return filtered
