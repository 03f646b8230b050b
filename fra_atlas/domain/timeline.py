"""Stage timeline events recorded by dashboard refresh runs."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def domain_build_stage_event(
    stage: str,
    status: str,
    details: dict[str, Any] | None = None,
    error: BaseException | None = None,
) -> dict[str, object]:
    """Build one structured timeline event payload.

    Args:
        stage: Stage name such as `load`, `aggregate` or `render`.
        status: Stage status marker (`started`, `completed`, `skipped`, `failed`).
        details: Optional structured details object.
        error: Optional exception whose type and message are attached.

    Returns:
        dict[str, object]: Structured timeline event.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    event_payload: dict[str, object] = {
        "stage": stage,
        "status": status,
        "at_utc": datetime.now(timezone.utc).isoformat(),
    }
    if details is not None:
        event_payload["details"] = details
    if error is not None:
        event_payload["error_type"] = type(error).__name__
        event_payload["error_message"] = str(error)
    return event_payload
