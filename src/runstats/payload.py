"""Conversion of GitHub Actions workflow run payloads into domain models.

Accepts the JSON documents returned by the GitHub REST ``actions/runs``
endpoints, either already decoded or read from a file.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from .errors import DataValidationError
from .models import WorkflowRun

logger = logging.getLogger(__name__)


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse GitHub ISO8601 timestamps into timezone-aware UTC datetimes.

    Raises:
        DataValidationError: If ``value`` is not an ISO8601 timestamp string.
    """
    if value is None or value == "":
        return None

    if not isinstance(value, str):
        raise DataValidationError(
            f"Timestamp in workflow run payload must be a string, got {type(value).__name__}: {value!r}"
        )

    normalized = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        parsed = datetime.fromisoformat(normalized)
    except ValueError as exc:
        raise DataValidationError(f"Invalid timestamp in workflow run payload: {value!r}") from exc

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _parse_integer(item: Mapping[str, Any], key: str, default: Optional[int] = None) -> int:
    """Read an integer field, rejecting booleans, floats and numeric strings."""
    value = item.get(key)
    if value is None and default is not None:
        return default
    if value is None:
        raise DataValidationError(f"Workflow run payload is missing required field '{key}': payload={item}")
    if isinstance(value, bool) or not isinstance(value, int):
        raise DataValidationError(
            f"Workflow run payload field '{key}' must be an integer, got {value!r}: payload={item}"
        )
    return value


def parse_workflow_run(item: Mapping[str, Any]) -> WorkflowRun:
    """Build a ``WorkflowRun`` from a single GitHub workflow run object.

    Raises:
        DataValidationError: If the item is not an object, has no integer ``id``,
            has a non-integer ``run_attempt``, or carries malformed timestamps.
    """
    if not isinstance(item, Mapping):
        raise DataValidationError(f"Workflow run payload must be an object, got {type(item).__name__}")

    run_id = _parse_integer(item, "id")
    run_attempt = _parse_integer(item, "run_attempt", default=1)

    actor = item.get("actor")
    actor_login = actor.get("login") if isinstance(actor, Mapping) else None
    run_started_at = parse_datetime(item.get("run_started_at"))
    updated_at = parse_datetime(item.get("updated_at"))

    if run_started_at is None or updated_at is None:
        logger.debug(
            "Workflow run is missing timestamps; duration defaults to zero",
            extra={"run_id": run_id},
        )

    return WorkflowRun(
        id=run_id,
        name=str(item.get("name") or ""),
        status=str(item.get("status") or ""),
        conclusion=item.get("conclusion"),
        actor=str(actor_login or ""),
        run_attempt=run_attempt,
        html_url=str(item.get("html_url") or ""),
        jobs_url=str(item.get("jobs_url") or ""),
        logs_url=str(item.get("logs_url") or ""),
        run_started_at=run_started_at,
        updated_at=updated_at,
        created_at=parse_datetime(item.get("created_at")),
    )


def parse_workflow_runs(payload: Union[Mapping[str, Any], List[Any]]) -> List[WorkflowRun]:
    """Build workflow runs from a list-runs document or a bare list of run objects.

    The list-runs document has the shape ``{"total_count": N, "workflow_runs": [...]}``;
    a missing ``workflow_runs`` key yields no runs. Input order is preserved.

    Raises:
        DataValidationError: If the payload has any other shape, including a
            ``workflow_runs`` value that is not a list.
    """
    if isinstance(payload, Mapping):
        items = payload.get("workflow_runs", [])
    else:
        items = payload

    if not isinstance(items, list):
        raise DataValidationError(
            f"Workflow runs payload has unexpected shape: {type(items).__name__}"
        )

    return [parse_workflow_run(item) for item in items]


def load_workflow_runs(path: Union[str, Path]) -> List[WorkflowRun]:
    """Read a JSON workflow runs document from ``path``.

    Raises:
        DataValidationError: If the file cannot be read or is not valid JSON.
    """
    file_path = Path(path)
    try:
        with file_path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except OSError as exc:
        raise DataValidationError(f"Unable to read workflow runs file: {file_path}") from exc
    except ValueError as exc:
        raise DataValidationError(f"Workflow runs file is not valid JSON: {file_path}") from exc

    runs = parse_workflow_runs(payload)
    logger.debug("Loaded workflow runs", extra={"path": str(file_path), "runs_total": len(runs)})
    return runs
