"""Service query resolution against the live catalog with file-based fallback."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from service_binding.adapters import (
    DefaultServicesLoaderPort,
    ServiceCatalogPort,
    ServiceMatchAmbiguousError,
    ServiceNotFoundError,
    ServiceQueryInvalidError,
)
from service_binding.domain import (
    SOURCE_CATALOG,
    SOURCE_DEFAULTS,
    ServiceDescriptor,
    ServiceFilter,
    domain_build_resolution_event,
    domain_build_service_filter,
    domain_filter_services,
)

from .interfaces import ServiceResolution, ServiceResolverPort

logger = logging.getLogger(__name__)


class ServiceResolver(ServiceResolverPort):
    """Resolve logical service names to credentials, falling back to a defaults file.

    Each call reads one fresh catalog snapshot and loads the defaults file at
    most once, only when some key has no catalog match. Nothing is cached
    between calls.
    """

    def __init__(
        self,
        catalog: ServiceCatalogPort,
        defaults_loader: DefaultServicesLoaderPort,
        default_services_file: str = "default-services.json",
    ):
        """Initialize resolver dependencies.

        Args:
            catalog: Live service catalog source.
            defaults_loader: Fallback configuration loader.
            default_services_file: Conventional defaults file used when no explicit path is given.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when dependencies are missing or the conventional file name is blank.
        """

        if catalog is None:
            raise ValueError("catalog must not be None")
        if defaults_loader is None:
            raise ValueError("defaults_loader must not be None")
        normalized_default_services_file = default_services_file.strip()
        if not normalized_default_services_file:
            raise ValueError("default_services_file must not be blank")

        self._catalog = catalog
        self._defaults_loader = defaults_loader
        self._default_services_file = normalized_default_services_file

    def resolution_get_services(self, query: object, services_file: object = "") -> dict[str, Any]:
        """Resolve every query entry into credentials.

        Args:
            query: Logical service names mapped to filter criteria.
            services_file: Defaults file path, empty for the conventional name, None to disable defaults.

        Returns:
            dict[str, Any]: Logical service names mapped to credentials payloads.

        Raises:
            ServiceQueryInvalidError: Raised when query or any criteria has an unsupported shape.
            ServiceMatchAmbiguousError: Raised when more than one catalog service matches a key.
            ServiceNotFoundError: Raised when neither catalog nor defaults satisfy a key.
            DefaultServicesParseError: Raised when the defaults file exists but is malformed.
            ServiceCatalogParseError: Raised when the catalog payload is malformed.
        """

        return self.resolution_resolve(query=query, services_file=services_file).credentials

    def resolution_resolve(self, query: object, services_file: object = "") -> ServiceResolution:
        """Resolve every query entry and report where each credential came from.

        Args:
            query: Logical service names mapped to filter criteria.
            services_file: Defaults file path, empty for the conventional name, None to disable defaults.

        Returns:
            ServiceResolution: Credentials with per-key source and timeline.

        Raises:
            ServiceBindingError: Raised when any query entry cannot be resolved.
        """

        service_filters = _resolution_build_query_filters(query)
        resolved_services_file = self._resolution_resolve_services_file(services_file)
        services = self._catalog.catalog_read_services()

        default_services: dict[str, Any] | None = None
        credentials: dict[str, Any] = {}
        sources: dict[str, str] = {}
        timeline: list[dict[str, object]] = []

        for service_key, service_filter in service_filters.items():
            matches = domain_filter_services(services, service_filter)
            if len(matches) == 1:
                credentials[service_key] = matches[0].credentials
                sources[service_key] = SOURCE_CATALOG
                timeline.append(
                    domain_build_resolution_event(
                        service_key=service_key,
                        source=SOURCE_CATALOG,
                        details={"service_name": matches[0].name, "label": matches[0].label},
                    )
                )
                continue
            if len(matches) > 1:
                raise ServiceMatchAmbiguousError(service_key=service_key, match_count=len(matches))

            if default_services is None:
                default_services = self._resolution_load_default_services(resolved_services_file)
            if service_key not in default_services:
                raise ServiceNotFoundError(service_key=service_key)

            logger.debug(
                "No service in %s matches %s. Returning default configuration from %s",
                self._catalog.catalog_source_name(),
                service_key,
                resolved_services_file,
            )
            credentials[service_key] = default_services[service_key]
            sources[service_key] = SOURCE_DEFAULTS
            timeline.append(
                domain_build_resolution_event(
                    service_key=service_key,
                    source=SOURCE_DEFAULTS,
                    details={"services_file": resolved_services_file},
                )
            )

        return ServiceResolution(
            credentials=credentials,
            sources=sources,
            services_file=resolved_services_file if default_services is not None else None,
            timeline=timeline,
        )

    def resolution_filter_services(self, criteria: object) -> list[ServiceDescriptor]:
        """Return catalog services matching one criteria object.

        Args:
            criteria: Mapping of expected attributes, service name string, or predicate callable.

        Returns:
            list[ServiceDescriptor]: Matching descriptors in catalog order.

        Raises:
            ServiceQueryInvalidError: Raised when criteria shape is unsupported.
            ServiceCatalogParseError: Raised when the catalog payload is malformed.
        """

        service_filter = _resolution_build_filter(service_key=None, criteria=criteria)
        return domain_filter_services(self._catalog.catalog_read_services(), service_filter)

    def resolution_service_credentials(self, criteria: object) -> Any:
        """Return credentials of the single catalog service matching criteria.

        Args:
            criteria: Mapping of expected attributes, service name string, or predicate callable.

        Returns:
            Any: Credentials payload of the matching service.

        Raises:
            ServiceNotFoundError: Raised when no catalog service matches.
            ServiceMatchAmbiguousError: Raised when more than one catalog service matches.
        """

        matches = self.resolution_filter_services(criteria)
        criteria_label = _resolution_describe_criteria(criteria)
        if not matches:
            raise ServiceNotFoundError(service_key=criteria_label)
        if len(matches) > 1:
            raise ServiceMatchAmbiguousError(service_key=criteria_label, match_count=len(matches))
        return matches[0].credentials

    def _resolution_resolve_services_file(self, services_file: object) -> str | None:
        if services_file is None:
            return None
        if not isinstance(services_file, (str, os.PathLike)):
            raise ServiceQueryInvalidError(
                f"services_file must be a path, an empty string or None, got {type(services_file).__name__}"
            )
        services_file_text = os.fspath(services_file)
        if not services_file_text:
            return self._default_services_file
        return services_file_text

    def _resolution_load_default_services(self, services_file: str | None) -> dict[str, Any]:
        if services_file is None:
            return {}
        return self._defaults_loader.defaults_load(services_file)


def _resolution_build_query_filters(query: object) -> dict[str, ServiceFilter]:
    """Validate query shape and normalize every criteria before matching.

    Args:
        query: Candidate query mapping.

    Returns:
        dict[str, ServiceFilter]: Normalized filters in query order.

    Raises:
        ServiceQueryInvalidError: Raised when query or any criteria is invalid.
    """

    if query is None or not isinstance(query, Mapping):
        raise ServiceQueryInvalidError("Missing mandatory query parameter")

    service_filters: dict[str, ServiceFilter] = {}
    for service_key, criteria in query.items():
        if not isinstance(service_key, str):
            raise ServiceQueryInvalidError(f"query keys must be strings, got {type(service_key).__name__}")
        service_filters[service_key] = _resolution_build_filter(service_key=service_key, criteria=criteria)
    return service_filters


def _resolution_build_filter(service_key: str | None, criteria: object) -> ServiceFilter:
    try:
        return domain_build_service_filter(criteria)
    except ValueError as error:
        if service_key is None:
            raise ServiceQueryInvalidError(f"Invalid service criteria: {error}") from error
        raise ServiceQueryInvalidError(f"Invalid criteria for {service_key}: {error}") from error


def _resolution_describe_criteria(criteria: object) -> str:
    if isinstance(criteria, str):
        return criteria
    if isinstance(criteria, Mapping):
        return ", ".join(f"{attribute_name}={value}" for attribute_name, value in criteria.items()) or "{}"
    return getattr(criteria, "__name__", repr(criteria))
