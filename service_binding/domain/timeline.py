"""Shared resolution timeline event helper utilities."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def domain_build_resolution_event(
    service_key: str,
    source: str,
    details: dict[str, Any] | None = None,
) -> dict[str, object]:
    """Build one structured resolution timeline event payload.

    Args:
        service_key: Logical service name from the query.
        source: Source that satisfied the key, `catalog` or `defaults`.
        details: Optional structured details object. Must never contain credentials.

    Returns:
        dict[str, object]: Structured timeline event.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    event_payload: dict[str, object] = {
        "service_key": service_key,
        "source": source,
        "at_utc": datetime.now(timezone.utc).isoformat(),
    }
    if details is not None:
        event_payload["details"] = details
    return event_payload
