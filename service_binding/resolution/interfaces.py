"""Typed interfaces for resolution-layer responsibilities."""

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class ServiceResolution:
    """Detailed result contract for one service query resolution.

    Attributes:
        credentials: Logical service names mapped to resolved credentials payloads.
        sources: Logical service names mapped to `catalog` or `defaults`.
        services_file: Defaults file consulted during the call, None when never consulted.
        timeline: Structured per-key resolution events without credentials.
    """

    credentials: dict[str, Any]
    sources: dict[str, str]
    services_file: str | None = None
    timeline: list[dict[str, object]] = field(default_factory=list)


class ServiceResolverPort(Protocol):
    """Port definition for resolving service queries into credentials."""

    def resolution_get_services(self, query: object, services_file: object = "") -> dict[str, Any]:
        """Resolve every query entry into credentials.

        Args:
            query: Logical service names mapped to filter criteria.
            services_file: Defaults file path, empty for the conventional name, None to disable defaults.

        Returns:
            dict[str, Any]: Logical service names mapped to credentials payloads.

        Raises:
            ServiceBindingError: Raised when any query entry cannot be resolved.
        """
