"""Typed domain models for bound service catalog entries.

This module provides the immutable descriptor contract shared between the
catalog source adapters and the resolution layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Final, Mapping

SOURCE_CATALOG: Final[str] = "catalog"
SOURCE_DEFAULTS: Final[str] = "defaults"


@dataclass(frozen=True)
class ServiceDescriptor:
    """One bound service instance visible to the running process.

    Attributes:
        name: User-assigned service instance name.
        label: Service type label, for example `postgresql` or `user-provided`.
        tags: Ordered service tags.
        plan: Optional service plan name.
        credentials: Opaque credentials payload.
        attributes: Full raw catalog entry used for arbitrary attribute matching.
    """

    name: str
    label: str
    tags: tuple[str, ...] = ()
    plan: str | None = None
    credentials: Mapping[str, Any] = field(default_factory=dict)
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def descriptor_attribute(self, attribute_name: str) -> object | None:
        """Return one descriptor attribute by catalog field name.

        Args:
            attribute_name: Catalog field name such as `label` or `provider`.

        Returns:
            object | None: Normalized field value, raw attribute value, or None when absent.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        if attribute_name == "name":
            return self.name
        if attribute_name == "label":
            return self.label
        if attribute_name == "plan":
            return self.plan
        if attribute_name == "tags":
            return list(self.tags)
        if attribute_name == "credentials":
            return self.credentials
        return self.attributes.get(attribute_name)
