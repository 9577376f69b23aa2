"""Domain models and matching rules shared across layer boundaries."""

from .catalog_parsing import domain_parse_service_catalog, domain_parse_service_instance
from .models import SOURCE_CATALOG, SOURCE_DEFAULTS, ServiceDescriptor
from .service_filter import (
	ServiceFilter,
	ServicePredicate,
	domain_build_service_filter,
	domain_filter_services,
)
from .timeline import domain_build_resolution_event

__all__ = [
	"SOURCE_CATALOG",
	"SOURCE_DEFAULTS",
	"ServiceDescriptor",
	"ServiceFilter",
	"ServicePredicate",
	"domain_build_resolution_event",
	"domain_build_service_filter",
	"domain_filter_services",
	"domain_parse_service_catalog",
	"domain_parse_service_instance",
]
