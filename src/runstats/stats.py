"""Statistics helpers for workflow run aggregation.

This module provides utilities for:
- Computing the median of pre-sorted samples.
- Computing the population standard deviation of duration samples.
- Aggregating execution duration statistics (min, max, mean, std, median).
- Computing guarded per-bucket rates.
"""

from __future__ import annotations

import math
from typing import List, Sequence

from .models import ExecutionDurationStats


def calculate_median(sorted_values: Sequence[float]) -> float:
    """Return the median of samples already sorted in ascending order.

    An odd count yields the middle value; an even count yields the mean of the
    two middle values. Empty input returns ``0.0``.
    """
    count = len(sorted_values)
    if count == 0:
        return 0.0

    middle = count // 2
    if count % 2:
        return float(sorted_values[middle])
    return (sorted_values[middle - 1] + sorted_values[middle]) / 2.0


def calculate_population_std(values: Sequence[float]) -> float:
    """Return the population standard deviation (divides by N, not N-1).

    Empty input returns ``0.0``.
    """
    if not values:
        return 0.0

    mean = math.fsum(values) / len(values)
    variance = math.fsum((value - mean) ** 2 for value in values) / len(values)
    return math.sqrt(variance)


def compute_duration_statistics(durations: Sequence[float]) -> ExecutionDurationStats:
    """Compute min, max, mean, population std and median for duration samples.

    Samples are sorted on a copy, so the caller's ordering is left untouched.

    Args:
        durations: Duration samples in seconds.

    Returns:
        ``ExecutionDurationStats`` with every field ``0.0`` when no samples exist.
    """
    if not durations:
        return ExecutionDurationStats()

    sorted_durations: List[float] = sorted(durations)
    return ExecutionDurationStats(
        min=float(sorted_durations[0]),
        max=float(sorted_durations[-1]),
        mean=math.fsum(sorted_durations) / len(sorted_durations),
        std=calculate_population_std(sorted_durations),
        median=calculate_median(sorted_durations),
    )


def compute_rate(count: int, total: int) -> float:
    """Return ``count / total``, or ``0.0`` when ``total`` is zero."""
    if total <= 0:
        return 0.0
    return count / total
