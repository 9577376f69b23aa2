"""Typed runtime settings with dotenv support and load-time validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class ServiceBindingSettings(BaseSettings):
    """Settings for service catalog lookup and default configuration fallback.

    Environment variable names map to field names in uppercase with the
    `SERVICE_BINDING_` prefix.
    Example: `default_services_file` reads from `SERVICE_BINDING_DEFAULT_SERVICES_FILE`.

    Attributes:
        catalog_variable_name: Environment variable holding the bound service catalog JSON.
        default_services_file: Conventional defaults file used when no explicit path is given.
    """

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_BINDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    catalog_variable_name: str = Field(default="VCAP_SERVICES", min_length=1)
    default_services_file: str = Field(default="default-services.json", min_length=1)

    @field_validator("catalog_variable_name", "default_services_file")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value


def config_load_settings() -> ServiceBindingSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        ServiceBindingSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return ServiceBindingSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Service binding configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
