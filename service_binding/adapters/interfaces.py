"""Typed interfaces for adapter-layer collaborators."""

from typing import Any, Protocol

from service_binding.domain import ServiceDescriptor


class ServiceCatalogPort(Protocol):
    """Port definition for reading the bound service catalog."""

    def catalog_source_name(self) -> str:
        """Return catalog source identifier for diagnostics.

        Returns:
            str: Human-readable catalog source identifier.

        Raises:
            RuntimeError: Raised when source metadata is unavailable.
        """

    def catalog_read_services(self) -> list[ServiceDescriptor]:
        """Read one fresh snapshot of all bound services.

        Returns:
            list[ServiceDescriptor]: Ordered catalog snapshot, empty when nothing is bound.

        Raises:
            ServiceCatalogParseError: Raised when the catalog payload is malformed.
        """


class DefaultServicesLoaderPort(Protocol):
    """Port definition for loading fallback service configuration."""

    def defaults_load(self, services_file: str) -> dict[str, Any]:
        """Load logical service names mapped to credentials from one file.

        Args:
            services_file: Path of the defaults file.

        Returns:
            dict[str, Any]: Loaded mapping, empty when the file does not exist.

        Raises:
            DefaultServicesParseError: Raised when the file exists but cannot be parsed.
        """
