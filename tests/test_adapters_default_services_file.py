"""Regression tests for the JSON default services file loader."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from service_binding.adapters import DefaultServicesParseError, JsonDefaultServicesLoader


def test_adapters_default_services_file_loads_json_object(tmp_path: Path) -> None:
    """Load logical names mapped to credentials from an existing file.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate loaded mapping.

    Raises:
        AssertionError: Raised when loaded mapping is incorrect.
    """

    services_file = tmp_path / "default-services.json"
    services_file.write_text(json.dumps({"db": {"url": "x"}}), encoding="utf-8")

    assert JsonDefaultServicesLoader().defaults_load(str(services_file)) == {"db": {"url": "x"}}


def test_adapters_default_services_file_missing_file_is_empty(tmp_path: Path) -> None:
    """Treat a missing defaults file as empty configuration.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate empty mapping.

    Raises:
        AssertionError: Raised when a missing file is treated as an error.
    """

    assert JsonDefaultServicesLoader().defaults_load(str(tmp_path / "absent.json")) == {}


def test_adapters_default_services_file_invalid_json_names_path(tmp_path: Path) -> None:
    """Raise a typed parse error naming the file and chaining the decode error.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate parse error contract.

    Raises:
        AssertionError: Raised when parse error contract is incorrect.
    """

    services_file = tmp_path / "broken.json"
    services_file.write_text("{\"db\": ", encoding="utf-8")

    with pytest.raises(DefaultServicesParseError) as error_info:
        JsonDefaultServicesLoader().defaults_load(str(services_file))

    assert str(services_file) in str(error_info.value)
    assert error_info.value.services_file == str(services_file)
    assert error_info.value.error_code == "CONFIG_PARSE_ERROR"
    assert isinstance(error_info.value.__cause__, json.JSONDecodeError)


def test_adapters_default_services_file_rejects_non_object_top_level(tmp_path: Path) -> None:
    """Reject valid JSON whose top level is not an object.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate top-level shape check.

    Raises:
        AssertionError: Raised when non-object payload is accepted.
    """

    services_file = tmp_path / "list.json"
    services_file.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(DefaultServicesParseError, match="top-level value must be a JSON object"):
        JsonDefaultServicesLoader().defaults_load(str(services_file))
