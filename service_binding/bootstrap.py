"""Resolver bootstrap wiring for settings validation and dependency assembly."""

from collections.abc import Mapping

from service_binding.adapters import EnvironmentServiceCatalog, JsonDefaultServicesLoader
from service_binding.config import ServiceBindingSettings, config_load_settings
from service_binding.resolution import ServiceResolver


def bootstrap_create_service_resolver(
    settings: ServiceBindingSettings | None = None,
    environ: Mapping[str, str] | None = None,
) -> ServiceResolver:
    """Assemble a service resolver over the process environment catalog.

    Args:
        settings: Optional pre-loaded settings, loaded from environment when omitted.
        environ: Optional environment mapping used instead of `os.environ`.

    Returns:
        ServiceResolver: Resolver reading a fresh catalog snapshot on every call.

    Raises:
        SettingsLoadError: Raised when settings validation fails.
    """

    resolved_settings = settings if settings is not None else config_load_settings()
    catalog = EnvironmentServiceCatalog(
        variable_name=resolved_settings.catalog_variable_name,
        environ=environ,
    )
    return ServiceResolver(
        catalog=catalog,
        defaults_loader=JsonDefaultServicesLoader(),
        default_services_file=resolved_settings.default_services_file,
    )
