"""Bound service credential lookup with local default configuration fallback."""

from .adapters import (
	DefaultServicesParseError,
	ServiceBindingError,
	ServiceCatalogParseError,
	ServiceMatchAmbiguousError,
	ServiceNotFoundError,
	ServiceQueryInvalidError,
)
from .domain import ServiceDescriptor
from .lookup import filter_services, get_services, read_services, service_credentials
from .resolution import ServiceResolution, ServiceResolver

__all__ = [
	"DefaultServicesParseError",
	"ServiceBindingError",
	"ServiceCatalogParseError",
	"ServiceDescriptor",
	"ServiceMatchAmbiguousError",
	"ServiceNotFoundError",
	"ServiceQueryInvalidError",
	"ServiceResolution",
	"ServiceResolver",
	"filter_services",
	"get_services",
	"read_services",
	"service_credentials",
]
