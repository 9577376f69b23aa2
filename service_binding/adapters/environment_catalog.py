"""Environment-variable service catalog adapter implementation."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping

from service_binding.domain import ServiceDescriptor, domain_parse_service_catalog

from .binding_errors import ServiceCatalogParseError
from .interfaces import ServiceCatalogPort

logger = logging.getLogger(__name__)


class EnvironmentServiceCatalog(ServiceCatalogPort):
    """Adapter decoding bound services from a platform-injected environment variable."""

    def __init__(
        self,
        variable_name: str = "VCAP_SERVICES",
        environ: Mapping[str, str] | None = None,
    ):
        """Initialize environment catalog adapter.

        Args:
            variable_name: Environment variable holding the catalog JSON.
            environ: Optional environment mapping, defaults to `os.environ` read at call time.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when variable name is blank.
        """

        normalized_variable_name = variable_name.strip()
        if not normalized_variable_name:
            raise ValueError("variable_name must not be blank")

        self._variable_name = normalized_variable_name
        self._environ = environ

    def catalog_source_name(self) -> str:
        """Return stable catalog source label.

        Returns:
            str: Source identifier.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        return f"env:{self._variable_name}"

    def catalog_read_services(self) -> list[ServiceDescriptor]:
        """Decode the catalog environment variable into descriptors.

        Returns:
            list[ServiceDescriptor]: Ordered catalog snapshot, empty when variable is unset or blank.

        Raises:
            ServiceCatalogParseError: Raised when variable content is not a valid catalog.
        """

        environ = os.environ if self._environ is None else self._environ
        raw_catalog = environ.get(self._variable_name)
        if raw_catalog is None or not raw_catalog.strip():
            logger.debug("Environment variable %s is not set, service catalog is empty", self._variable_name)
            return []

        try:
            payload = json.loads(raw_catalog)
        except json.JSONDecodeError as error:
            raise ServiceCatalogParseError(variable_name=self._variable_name, detail=str(error)) from error

        try:
            return domain_parse_service_catalog(payload)
        except ValueError as error:
            raise ServiceCatalogParseError(variable_name=self._variable_name, detail=str(error)) from error
