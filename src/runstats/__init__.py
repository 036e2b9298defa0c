"""Aggregate statistics over GitHub Actions workflow runs.

Applications embedding the package call ``configure_logging(load_config())``
once at startup to apply ``RUNSTATS_LOG_LEVEL`` to the ``runstats`` loggers,
then feed runs from ``load_workflow_runs`` or ``parse_workflow_runs`` into
``aggregate_workflow_runs``.
"""

from .config import Config, configure_logging, load_config
from .models import (
    ConclusionCategory,
    ExecutionDurationStats,
    Rate,
    WorkflowRun,
    WorkflowRunsConclusion,
    WorkflowRunsStatsSummary,
)
from .parser import aggregate_workflow_runs
from .payload import load_workflow_runs, parse_workflow_runs

__all__ = [
    "ConclusionCategory",
    "Config",
    "ExecutionDurationStats",
    "Rate",
    "WorkflowRun",
    "WorkflowRunsConclusion",
    "WorkflowRunsStatsSummary",
    "aggregate_workflow_runs",
    "configure_logging",
    "load_config",
    "load_workflow_runs",
    "parse_workflow_runs",
]
