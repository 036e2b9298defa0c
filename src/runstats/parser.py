"""Aggregation of workflow runs into outcome buckets and summary statistics.

A single pass classifies every run into exactly one of the success, failure
and others buckets. Rates are computed per bucket and execution duration
statistics are computed over successful runs only.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from .models import (
    ConclusionCategory,
    Rate,
    WorkflowRun,
    WorkflowRunsConclusion,
    WorkflowRunsStatsSummary,
)
from .stats import compute_duration_statistics, compute_rate

logger = logging.getLogger(__name__)


def aggregate_workflow_runs(runs: Iterable[WorkflowRun]) -> WorkflowRunsStatsSummary:
    """Aggregate workflow runs into a statistics summary.

    Business logic:
    - Classify each run by conclusion: ``"success"``, ``"failure"``, or others.
    - Append each run to its bucket, preserving relative input order.
    - Take the summary name from the first run (empty for no runs).
    - Compute each bucket's rate as ``count / total`` (all zero for no runs).
    - Compute duration statistics from successful runs only.

    The input is never mutated and the function never raises for well-typed
    input, so repeated calls on the same runs return equal summaries.
    """
    run_list: List[WorkflowRun] = list(runs)
    summary = WorkflowRunsStatsSummary(total_runs_count=len(run_list))

    if run_list:
        summary.name = run_list[0].name

    for run in run_list:
        bucket: WorkflowRunsConclusion = summary.conclusions[ConclusionCategory.classify(run.conclusion)]
        bucket.workflow_runs.append(run)
        bucket.runs_count += 1

    success = summary.conclusions[ConclusionCategory.SUCCESS]
    failure = summary.conclusions[ConclusionCategory.FAILURE]
    others = summary.conclusions[ConclusionCategory.OTHERS]

    summary.rate = Rate(
        success=compute_rate(success.runs_count, summary.total_runs_count),
        failure=compute_rate(failure.runs_count, summary.total_runs_count),
        others=compute_rate(others.runs_count, summary.total_runs_count),
    )
    summary.execution_duration_stats = compute_duration_statistics(
        [run.duration for run in success.workflow_runs]
    )

    logger.info(
        "Aggregated workflow runs",
        extra={
            "workflow_name": summary.name,
            "runs_total": summary.total_runs_count,
            "success_runs": success.runs_count,
            "failure_runs": failure.runs_count,
            "others_runs": others.runs_count,
        },
    )

    return summary
