"""Regression tests for the environment-variable service catalog adapter."""

from __future__ import annotations

import json

import pytest

from service_binding.adapters import EnvironmentServiceCatalog, ServiceCatalogParseError
import service_binding.adapters.environment_catalog as catalog_module


def test_adapters_environment_catalog_reads_services_from_mapping() -> None:
    """Decode descriptors from an injected environment mapping.

    Returns:
        None: Assertions validate decoded catalog.

    Raises:
        AssertionError: Raised when decoded descriptors are incorrect.
    """

    environ = {
        "VCAP_SERVICES": json.dumps(
            {"postgresql": [{"name": "mydb", "label": "postgresql", "credentials": {"uri": "postgres://x"}}]}
        )
    }
    catalog = EnvironmentServiceCatalog(environ=environ)

    services = catalog.catalog_read_services()

    assert catalog.catalog_source_name() == "env:VCAP_SERVICES"
    assert len(services) == 1
    assert services[0].name == "mydb"
    assert services[0].credentials == {"uri": "postgres://x"}


@pytest.mark.parametrize("environ", [{}, {"VCAP_SERVICES": ""}, {"VCAP_SERVICES": "   "}])
def test_adapters_environment_catalog_unset_variable_is_empty(environ: dict[str, str]) -> None:
    """Return an empty catalog when the variable is unset or blank.

    Args:
        environ: Injected environment mapping.

    Returns:
        None: Assertions validate empty catalog behavior.

    Raises:
        AssertionError: Raised when a non-empty catalog is returned.
    """

    assert EnvironmentServiceCatalog(environ=environ).catalog_read_services() == []


def test_adapters_environment_catalog_reads_process_environment_per_call(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read `os.environ` on every call instead of caching the first snapshot.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate fresh snapshots.

    Raises:
        AssertionError: Raised when a stale snapshot is returned.
    """

    monkeypatch.delenv("VCAP_SERVICES", raising=False)
    catalog = EnvironmentServiceCatalog()

    assert catalog.catalog_read_services() == []

    monkeypatch.setenv("VCAP_SERVICES", json.dumps({"redis": [{"name": "cache"}]}))

    assert [descriptor.name for descriptor in catalog.catalog_read_services()] == ["cache"]


def test_adapters_environment_catalog_custom_variable_name() -> None:
    """Read the catalog from a configured variable name.

    Returns:
        None: Assertions validate variable selection.

    Raises:
        AssertionError: Raised when the wrong variable is read.
    """

    environ = {
        "VCAP_SERVICES": json.dumps({"redis": [{"name": "ignored"}]}),
        "BOUND_SERVICES": json.dumps({"redis": [{"name": "selected"}]}),
    }

    services = EnvironmentServiceCatalog(variable_name="BOUND_SERVICES", environ=environ).catalog_read_services()

    assert [descriptor.name for descriptor in services] == ["selected"]


def test_adapters_environment_catalog_invalid_json_raises_typed_error() -> None:
    """Raise a typed parse error naming the variable for invalid JSON.

    Returns:
        None: Assertions validate error mapping.

    Raises:
        AssertionError: Raised when error mapping is incorrect.
    """

    catalog = EnvironmentServiceCatalog(environ={"VCAP_SERVICES": "{not json"})

    with pytest.raises(ServiceCatalogParseError, match="Could not parse VCAP_SERVICES") as error_info:
        catalog.catalog_read_services()

    assert error_info.value.variable_name == "VCAP_SERVICES"
    assert error_info.value.error_code == "CATALOG_PARSE_ERROR"
    assert isinstance(error_info.value.__cause__, json.JSONDecodeError)


def test_adapters_environment_catalog_wrong_shape_raises_typed_error() -> None:
    """Raise a typed parse error when decoded JSON breaks the catalog contract.

    Returns:
        None: Assertions validate shape error mapping.

    Raises:
        AssertionError: Raised when shape errors are not mapped.
    """

    catalog = EnvironmentServiceCatalog(environ={"VCAP_SERVICES": json.dumps(["mydb"])})

    with pytest.raises(ServiceCatalogParseError, match="keyed by service label"):
        catalog.catalog_read_services()


def test_adapters_environment_catalog_logs_absent_variable(caplog: pytest.LogCaptureFixture) -> None:
    """Emit a debug record when the catalog variable is absent.

    Args:
        caplog: Pytest log capture fixture.

    Returns:
        None: Assertions validate debug logging.

    Raises:
        AssertionError: Raised when the debug record is missing.
    """

    with caplog.at_level("DEBUG", logger=catalog_module.logger.name):
        EnvironmentServiceCatalog(environ={}).catalog_read_services()

    assert "VCAP_SERVICES is not set" in caplog.text


def test_adapters_environment_catalog_rejects_blank_variable_name() -> None:
    """Reject blank variable names at construction.

    Returns:
        None: Assertions validate constructor validation.

    Raises:
        AssertionError: Raised when blank names are accepted.
    """

    with pytest.raises(ValueError, match="variable_name must not be blank"):
        EnvironmentServiceCatalog(variable_name="  ")
