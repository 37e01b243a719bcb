"""Per-target outcome values collected by the process killer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence


class TokenStatus(str, Enum):
    TERMINATED = "terminated"
    PARTIAL = "partial"
    FAILED = "failed"
    NOT_FOUND = "not_found"
    RESOLUTION_FAILED = "resolution_failed"


@dataclass(frozen=True)
class PidOutcome:
    """Result of one termination attempt."""

    pid: int
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class TokenOutcome:
    """Result of handling one command-line token."""

    token: str
    status: TokenStatus
    pid_outcomes: Sequence[PidOutcome] = ()
    error: Optional[Exception] = None

    @classmethod
    def from_pid_outcomes(cls, token: str, pid_outcomes: Sequence[PidOutcome]) -> "TokenOutcome":
        failures = sum(1 for outcome in pid_outcomes if not outcome.succeeded)
        if failures == 0:
            status = TokenStatus.TERMINATED
        elif failures == len(pid_outcomes):
            status = TokenStatus.FAILED
        else:
            status = TokenStatus.PARTIAL
        return cls(token=token, status=status, pid_outcomes=tuple(pid_outcomes))

    @classmethod
    def not_found(cls, token: str) -> "TokenOutcome":
        return cls(token=token, status=TokenStatus.NOT_FOUND)

    @classmethod
    def resolution_failed(cls, token: str, error: Exception) -> "TokenOutcome":
        return cls(token=token, status=TokenStatus.RESOLUTION_FAILED, error=error)


@dataclass(frozen=True)
class KillSummary:
    tokens: int
    terminated: int
    failed: int
    unresolved: int


@dataclass
class KillReport:
    """Ordered outcomes for every token of a run."""

    outcomes: List[TokenOutcome] = field(default_factory=list)

    def add(self, outcome: TokenOutcome) -> None:
        self.outcomes.append(outcome)

    @property
    def pid_outcomes(self) -> List[PidOutcome]:
        return [pid_outcome for outcome in self.outcomes for pid_outcome in outcome.pid_outcomes]

    @property
    def has_failures(self) -> bool:
        return any(outcome.status not in (TokenStatus.TERMINATED, TokenStatus.NOT_FOUND) for outcome in self.outcomes)

    def summary(self) -> KillSummary:
        pid_outcomes = self.pid_outcomes
        terminated = sum(1 for outcome in pid_outcomes if outcome.succeeded)
        unresolved = sum(
            1 for outcome in self.outcomes if outcome.status in (TokenStatus.NOT_FOUND, TokenStatus.RESOLUTION_FAILED)
        )
        return KillSummary(
            tokens=len(self.outcomes),
            terminated=terminated,
            failed=len(pid_outcomes) - terminated,
            unresolved=unresolved,
        )
