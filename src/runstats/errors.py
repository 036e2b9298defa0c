"""Custom exception types for workflow run statistics."""


class WorkflowRunsStatsError(Exception):
    """Base exception for all recoverable workflow run statistics errors."""


class ConfigurationError(WorkflowRunsStatsError):
    """Raised when runtime configuration values are missing or invalid."""


class DataValidationError(WorkflowRunsStatsError):
    """Raised when workflow run payloads or input files do not meet expected constraints."""
