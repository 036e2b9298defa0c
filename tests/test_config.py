"""Tests for environment configuration and logging setup."""

import logging
import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from runstats.config import DEFAULT_LOG_LEVEL, Config, configure_logging, load_config
from runstats.errors import ConfigurationError, WorkflowRunsStatsError


def test_load_config_defaults_log_level_when_unset(monkeypatch):
    """Verify the default log level is used when the environment variable is absent."""
    monkeypatch.delenv("RUNSTATS_LOG_LEVEL", raising=False)

    config = load_config()

    assert config.log_level == DEFAULT_LOG_LEVEL


def test_load_config_normalizes_case_and_whitespace(monkeypatch):
    """Verify log level names are accepted case-insensitively."""
    monkeypatch.setenv("RUNSTATS_LOG_LEVEL", "  debug ")

    config = load_config()

    assert config.log_level == "DEBUG"


def test_load_config_invalid_level_raises_configuration_error(monkeypatch):
    """Verify unknown log level names raise ConfigurationError."""
    monkeypatch.setenv("RUNSTATS_LOG_LEVEL", "chatty")

    with pytest.raises(ConfigurationError) as exc_info:
        load_config()

    assert isinstance(exc_info.value, WorkflowRunsStatsError)
    assert "RUNSTATS_LOG_LEVEL" in str(exc_info.value)


def test_configure_logging_sets_package_logger_level():
    """Verify the configured level is applied to the package logger only."""
    package_logger = logging.getLogger("runstats")
    root_level = logging.getLogger().level
    previous_level = package_logger.level
    try:
        configured = configure_logging(Config(log_level="INFO"))

        assert configured is package_logger
        assert package_logger.level == logging.INFO
        assert logging.getLogger().level == root_level
    finally:
        package_logger.setLevel(previous_level)


def test_package_exposes_startup_hooks_for_embedding_applications(monkeypatch):
    """Verify the package-level config hooks configure logging before aggregating fixture runs."""
    import runstats

    monkeypatch.setenv("RUNSTATS_LOG_LEVEL", "debug")
    package_logger = logging.getLogger("runstats")
    previous_level = package_logger.level
    try:
        runstats.configure_logging(runstats.load_config())
        runs = runstats.load_workflow_runs(Path(__file__).parent / "testdata" / "runs" / "success.json")
        summary = runstats.aggregate_workflow_runs(runs)

        assert package_logger.level == logging.DEBUG
        assert summary.total_runs_count == 2
    finally:
        package_logger.setLevel(previous_level)
