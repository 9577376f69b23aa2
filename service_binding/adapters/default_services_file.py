"""JSON file loader for fallback service configuration."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .binding_errors import DefaultServicesParseError
from .interfaces import DefaultServicesLoaderPort

logger = logging.getLogger(__name__)


class JsonDefaultServicesLoader(DefaultServicesLoaderPort):
    """Load default service credentials from a local JSON object file."""

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding

    def defaults_load(self, services_file: str) -> dict[str, Any]:
        """Load one defaults file, treating a missing file as empty configuration.

        Args:
            services_file: Path of the defaults file, relative paths resolve from the working directory.

        Returns:
            dict[str, Any]: Logical service names mapped to credentials payloads.

        Raises:
            DefaultServicesParseError: Raised when the file cannot be read or decoded as a JSON object.
        """

        services_path = Path(services_file)
        if not services_path.exists():
            return {}

        logger.debug("Loading default service configuration from %s", services_file)
        try:
            payload = json.loads(services_path.read_text(encoding=self._encoding))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as error:
            raise DefaultServicesParseError(services_file=services_file, detail=str(error)) from error

        if not isinstance(payload, dict):
            raise DefaultServicesParseError(
                services_file=services_file,
                detail=f"top-level value must be a JSON object, got {type(payload).__name__}",
            )
        return payload
