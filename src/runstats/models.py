"""Domain models for GitHub Actions workflow run statistics.

Runs keep the subset of API payload fields needed for aggregation and
downstream display. Summaries are freshly built per aggregation call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional


class ConclusionCategory(str, Enum):
    """Fixed outcome buckets a workflow run is classified into."""

    SUCCESS = "success"
    FAILURE = "failure"
    OTHERS = "others"

    @classmethod
    def classify(cls, conclusion: Optional[str]) -> "ConclusionCategory":
        """Map a raw run conclusion to its bucket.

        Only the exact values ``"success"`` and ``"failure"`` get their own
        bucket. Anything else (``"cancelled"``, ``"skipped"``, empty or
        ``None`` for in-progress runs) lands in ``OTHERS``.
        """
        if conclusion == cls.SUCCESS.value:
            return cls.SUCCESS
        if conclusion == cls.FAILURE.value:
            return cls.FAILURE
        return cls.OTHERS


def compute_duration(run_started_at: Optional[datetime], updated_at: Optional[datetime]) -> float:
    """Return seconds from run start to last update, or ``0.0`` if either is missing."""
    if run_started_at is None or updated_at is None:
        return 0.0
    return (updated_at - run_started_at).total_seconds()


@dataclass(frozen=True, slots=True)
class WorkflowRun:
    """Represents one executed CI workflow run.

    ``duration`` is derived from ``updated_at - run_started_at`` unless the
    caller supplies a precomputed value.
    """

    id: int
    name: str = ""
    status: str = ""
    conclusion: Optional[str] = None
    actor: str = ""
    run_attempt: int = 1
    html_url: str = ""
    jobs_url: str = ""
    logs_url: str = ""
    run_started_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    duration: Optional[float] = None

    def __post_init__(self) -> None:
        if self.duration is None:
            object.__setattr__(self, "duration", compute_duration(self.run_started_at, self.updated_at))


@dataclass(slots=True)
class WorkflowRunsConclusion:
    """Represents the runs sharing one conclusion bucket, in input order."""

    runs_count: int = 0
    workflow_runs: List[WorkflowRun] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Rate:
    """Represents the fraction of runs in each conclusion bucket."""

    success: float = 0.0
    failure: float = 0.0
    others: float = 0.0


@dataclass(frozen=True, slots=True)
class ExecutionDurationStats:
    """Represents descriptive statistics over successful run durations in seconds."""

    min: float = 0.0
    max: float = 0.0
    mean: float = 0.0
    std: float = 0.0
    median: float = 0.0


def _empty_conclusions() -> Dict[ConclusionCategory, WorkflowRunsConclusion]:
    return {category: WorkflowRunsConclusion() for category in ConclusionCategory}


@dataclass(slots=True)
class WorkflowRunsStatsSummary:
    """Represents aggregated statistics for a list of workflow runs."""

    name: str = ""
    total_runs_count: int = 0
    rate: Rate = field(default_factory=Rate)
    execution_duration_stats: ExecutionDurationStats = field(default_factory=ExecutionDurationStats)
    conclusions: Dict[ConclusionCategory, WorkflowRunsConclusion] = field(
        default_factory=_empty_conclusions
    )
