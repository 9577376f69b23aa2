"""Module-level lookup helpers over the process environment catalog.

Each helper assembles a fresh resolver per call, so settings and environment
changes are always observed and no state is shared between calls.
"""

from __future__ import annotations

from typing import Any

from service_binding.bootstrap import bootstrap_create_service_resolver
from service_binding.domain import ServiceDescriptor


def get_services(query: object, services_file: object = "") -> dict[str, Any]:
    """Look up bound services, falling back to a default configuration file.

    Args:
        query: Logical service names mapped to filter criteria. Criteria is a mapping
            of expected attributes (`label`, `name`, `plan`, `tag`, `tags`, ...), a
            service instance name, or a predicate callable.
        services_file: Defaults JSON file path. Empty uses `default-services.json`,
            None disables the defaults file.

    Returns:
        dict[str, Any]: Logical service names mapped to credentials payloads.

    Raises:
        ServiceBindingError: Raised when any query entry cannot be resolved.
        SettingsLoadError: Raised when settings validation fails.
    """

    return bootstrap_create_service_resolver().resolution_get_services(query=query, services_file=services_file)


def service_credentials(criteria: object) -> Any:
    """Return credentials of the single bound service matching criteria.

    Args:
        criteria: Mapping of expected attributes, service name string, or predicate callable.

    Returns:
        Any: Credentials payload.

    Raises:
        ServiceNotFoundError: Raised when no bound service matches.
        ServiceMatchAmbiguousError: Raised when more than one bound service matches.
    """

    return bootstrap_create_service_resolver().resolution_service_credentials(criteria)


def filter_services(criteria: object) -> list[ServiceDescriptor]:
    """Return bound services matching criteria in catalog order."""

    return bootstrap_create_service_resolver().resolution_filter_services(criteria)


def read_services() -> list[ServiceDescriptor]:
    """Return every bound service from the process environment catalog."""

    return bootstrap_create_service_resolver().resolution_filter_services({})
