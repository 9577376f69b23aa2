"""Project-native typed exceptions for service binding resolution failures."""

from __future__ import annotations


class ServiceBindingError(Exception):
    """Base exception for service binding failures.

    Attributes:
        error_code: Stable machine-readable failure kind.
    """

    error_code: str = "SERVICE_BINDING_ERROR"

    def __init__(self, message: str, error_code: str | None = None):
        super().__init__(message)
        if error_code is not None:
            self.error_code = error_code


class ServiceQueryInvalidError(ServiceBindingError, ValueError):
    """Query argument is missing or has an unsupported shape."""

    error_code = "INVALID_ARGUMENT"


class ServiceMatchAmbiguousError(ServiceBindingError, LookupError):
    """More than one catalog service matches a query key.

    Attributes:
        service_key: Logical service name from the query.
        match_count: Number of matching catalog services.
    """

    error_code = "AMBIGUOUS_MATCH"

    def __init__(self, service_key: str, match_count: int):
        super().__init__(f"Found {match_count} services matching {service_key}")
        self.service_key = service_key
        self.match_count = match_count


class ServiceNotFoundError(ServiceBindingError, LookupError):
    """No catalog service and no default configuration matches a query key.

    Attributes:
        service_key: Logical service name from the query.
    """

    error_code = "NOT_FOUND"

    def __init__(self, service_key: str):
        super().__init__(f"No service matches {service_key}")
        self.service_key = service_key


class DefaultServicesParseError(ServiceBindingError, ValueError):
    """Default services file exists but does not hold a valid JSON object.

    Attributes:
        services_file: Path of the file that failed to parse.
    """

    error_code = "CONFIG_PARSE_ERROR"

    def __init__(self, services_file: str, detail: str):
        super().__init__(f"Could not parse {services_file}: {detail}")
        self.services_file = services_file


class ServiceCatalogParseError(ServiceBindingError, ValueError):
    """Service catalog environment variable does not hold a valid catalog.

    Attributes:
        variable_name: Environment variable holding the catalog.
    """

    error_code = "CATALOG_PARSE_ERROR"

    def __init__(self, variable_name: str, detail: str):
        super().__init__(f"Could not parse {variable_name}: {detail}")
        self.variable_name = variable_name
