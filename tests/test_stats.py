"""Tests for statistical calculations."""

import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from runstats.models import ExecutionDurationStats
from runstats.stats import (
    calculate_median,
    calculate_population_std,
    compute_duration_statistics,
    compute_rate,
)


def test_calculate_median_empty_returns_zero():
    """Verify the median of no samples is zero."""
    assert calculate_median([]) == 0.0


def test_calculate_median_odd_count_returns_middle_value():
    """Verify an odd number of samples yields the middle value."""
    assert calculate_median([42.0]) == 42.0
    assert calculate_median([10.0, 20.0, 70.0]) == 20.0


def test_calculate_median_even_count_returns_mean_of_middle_pair():
    """Verify an even number of samples yields the mean of the two middle values."""
    assert calculate_median([20.0, 40.0]) == 30.0
    assert calculate_median([10.0, 20.0, 40.0, 70.0]) == 30.0
    assert calculate_median([1, 2]) == 1.5


def test_calculate_population_std_divides_by_sample_count():
    """Verify the standard deviation uses the population formula."""
    assert calculate_population_std([20.0, 40.0]) == pytest.approx(10.0)
    assert calculate_population_std([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]) == pytest.approx(2.0)
    assert calculate_population_std([42.0]) == 0.0
    assert calculate_population_std([]) == 0.0


def test_compute_duration_statistics_empty_returns_zeros():
    """Verify no samples produce all-zero duration statistics."""
    assert compute_duration_statistics([]) == ExecutionDurationStats(
        min=0.0, max=0.0, mean=0.0, std=0.0, median=0.0
    )


def test_compute_duration_statistics_two_values():
    """Verify durations of 20s and 40s produce the expected summary."""
    stats = compute_duration_statistics([40.0, 20.0])

    assert stats.min == 20.0
    assert stats.max == 40.0
    assert stats.mean == pytest.approx(30.0)
    assert stats.std == pytest.approx(10.0)
    assert stats.median == pytest.approx(30.0)


def test_compute_duration_statistics_does_not_mutate_samples():
    """Verify statistics are computed on a sorted copy of the samples."""
    samples = [30.0, 10.0, 20.0]

    stats = compute_duration_statistics(samples)

    assert samples == [30.0, 10.0, 20.0]
    assert stats.median == 20.0


def test_compute_rate_guards_zero_total():
    """Verify rates are zero rather than undefined when there are no runs."""
    assert compute_rate(0, 0) == 0.0
    assert compute_rate(1, 4) == 0.25
    assert compute_rate(3, 3) == 1.0
