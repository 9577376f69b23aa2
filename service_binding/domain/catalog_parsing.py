"""Shared parsing helpers for decoded service catalog payloads.

The platform publishes bound services grouped by service label:
`{"<label>": [{"name": ..., "label": ..., "tags": [...], "credentials": {...}}]}`.
These helpers flatten that structure into an ordered descriptor list.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models import ServiceDescriptor


def domain_parse_service_catalog(payload: object) -> list[ServiceDescriptor]:
    """Flatten one decoded catalog payload into ordered descriptors.

    Args:
        payload: Decoded JSON value of the catalog environment variable.

    Returns:
        list[ServiceDescriptor]: Descriptors in label-group then instance order.

    Raises:
        ValueError: Raised when payload shape does not match the catalog contract.
    """

    if payload is None:
        return []
    if not isinstance(payload, Mapping):
        raise ValueError("service catalog must be a JSON object keyed by service label")

    descriptors: list[ServiceDescriptor] = []
    for group_label, instances in payload.items():
        if not isinstance(instances, list):
            raise ValueError(f"service catalog group `{group_label}` must be a list of service instances")
        for instance_index, instance in enumerate(instances):
            descriptors.append(
                domain_parse_service_instance(
                    instance=instance,
                    group_label=str(group_label),
                    instance_index=instance_index,
                )
            )
    return descriptors


def domain_parse_service_instance(
    instance: object,
    group_label: str,
    instance_index: int = 0,
) -> ServiceDescriptor:
    """Parse one catalog instance entry into a `ServiceDescriptor`.

    Args:
        instance: Raw instance entry.
        group_label: Label of the catalog group the entry belongs to.
        instance_index: Position inside the group, used in error messages.

    Returns:
        ServiceDescriptor: Parsed immutable descriptor.

    Raises:
        ValueError: Raised when required instance fields are missing or malformed.
    """

    location = f"{group_label}[{instance_index}]"
    if not isinstance(instance, Mapping):
        raise ValueError(f"service instance {location} must be a JSON object")

    name = instance.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"service instance {location} must define a non-empty `name`")

    label = instance.get("label", group_label)
    if not isinstance(label, str):
        raise ValueError(f"service instance {location} has a non-string `label`")

    raw_tags = instance.get("tags") or []
    if not isinstance(raw_tags, list) or not all(isinstance(tag, str) for tag in raw_tags):
        raise ValueError(f"service instance {location} `tags` must be a list of strings")

    plan = instance.get("plan")
    if plan is not None and not isinstance(plan, str):
        raise ValueError(f"service instance {location} has a non-string `plan`")

    credentials: Any = instance.get("credentials")
    if credentials is None:
        credentials = {}
    if not isinstance(credentials, Mapping):
        raise ValueError(f"service instance {location} `credentials` must be a JSON object")

    return ServiceDescriptor(
        name=name,
        label=label,
        tags=tuple(raw_tags),
        plan=plan,
        credentials=credentials,
        attributes=dict(instance),
    )
