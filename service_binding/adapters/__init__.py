"""Adapter layer package for service catalog and defaults file boundaries."""

from .binding_errors import (
	DefaultServicesParseError,
	ServiceBindingError,
	ServiceCatalogParseError,
	ServiceMatchAmbiguousError,
	ServiceNotFoundError,
	ServiceQueryInvalidError,
)
from .default_services_file import JsonDefaultServicesLoader
from .environment_catalog import EnvironmentServiceCatalog
from .interfaces import DefaultServicesLoaderPort, ServiceCatalogPort

__all__ = [
	"DefaultServicesLoaderPort",
	"DefaultServicesParseError",
	"EnvironmentServiceCatalog",
	"JsonDefaultServicesLoader",
	"ServiceBindingError",
	"ServiceCatalogParseError",
	"ServiceCatalogPort",
	"ServiceMatchAmbiguousError",
	"ServiceNotFoundError",
	"ServiceQueryInvalidError",
]
