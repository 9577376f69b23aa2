"""Service filter criteria model and catalog matching rules.

Criteria arrive in three shapes: a mapping of expected attribute values, a
plain string naming one service instance, or a predicate callable. All of them
are normalized into one immutable `ServiceFilter` before any matching runs.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from .models import ServiceDescriptor

ServicePredicate = Callable[[ServiceDescriptor], bool]

_TAG_CRITERION: str = "tag"
_TAGS_CRITERION: str = "tags"


@dataclass(frozen=True)
class ServiceFilter:
    """Normalized filter criteria for one query entry.

    Attributes:
        expected_attributes: Attribute name and value pairs matched by equality.
        required_tags: Tags that every matching descriptor must carry.
        predicate: Optional caller-supplied predicate applied after attribute checks.
    """

    expected_attributes: tuple[tuple[str, object], ...] = ()
    required_tags: tuple[str, ...] = ()
    predicate: ServicePredicate | None = None

    def filter_matches(self, descriptor: ServiceDescriptor) -> bool:
        """Return whether one descriptor satisfies every configured condition.

        Args:
            descriptor: Catalog descriptor to test.

        Returns:
            bool: True when all conditions hold.

        Raises:
            Exception: Propagates any error raised by a caller-supplied predicate.
        """

        for attribute_name, expected_value in self.expected_attributes:
            if descriptor.descriptor_attribute(attribute_name) != expected_value:
                return False

        descriptor_tags = set(descriptor.tags)
        if any(tag not in descriptor_tags for tag in self.required_tags):
            return False

        if self.predicate is not None:
            return bool(self.predicate(descriptor))
        return True


def domain_build_service_filter(criteria: object) -> ServiceFilter:
    """Normalize raw query criteria into a `ServiceFilter`.

    Args:
        criteria: Mapping of expected attributes, service name string, or predicate callable.

    Returns:
        ServiceFilter: Immutable normalized filter.

    Raises:
        ValueError: Raised when criteria shape is unsupported.
    """

    if isinstance(criteria, ServiceFilter):
        return criteria
    if isinstance(criteria, str):
        if not criteria.strip():
            raise ValueError("service name criteria must not be blank")
        return ServiceFilter(expected_attributes=(("name", criteria),))
    if isinstance(criteria, Mapping):
        return _domain_build_attribute_filter(criteria)
    if callable(criteria):
        return ServiceFilter(predicate=criteria)
    raise ValueError(
        f"criteria must be a mapping, a service name or a predicate, got {type(criteria).__name__}"
    )


def domain_filter_services(
    services: Sequence[ServiceDescriptor],
    service_filter: ServiceFilter,
) -> list[ServiceDescriptor]:
    """Return catalog descriptors matching one filter, preserving catalog order.

    Args:
        services: Catalog snapshot.
        service_filter: Normalized filter criteria.

    Returns:
        list[ServiceDescriptor]: Matching descriptors, possibly empty.

    Raises:
        Exception: Propagates any error raised by a caller-supplied predicate.
    """

    return [descriptor for descriptor in services if service_filter.filter_matches(descriptor)]


def _domain_build_attribute_filter(criteria: Mapping) -> ServiceFilter:
    """Build an attribute filter from mapping criteria.

    Args:
        criteria: Mapping of catalog attribute names to expected values.

    Returns:
        ServiceFilter: Normalized attribute filter.

    Raises:
        ValueError: Raised when attribute names or tag values are invalid.
    """

    expected_attributes: list[tuple[str, object]] = []
    required_tags: list[str] = []

    for attribute_name, expected_value in criteria.items():
        if not isinstance(attribute_name, str) or not attribute_name:
            raise ValueError("criteria attribute names must be non-empty strings")
        if attribute_name in (_TAG_CRITERION, _TAGS_CRITERION):
            required_tags.extend(_domain_normalize_tags(attribute_name, expected_value))
            continue
        expected_attributes.append((attribute_name, expected_value))

    return ServiceFilter(
        expected_attributes=tuple(expected_attributes),
        required_tags=tuple(dict.fromkeys(required_tags)),
    )


def _domain_normalize_tags(attribute_name: str, expected_value: object) -> list[str]:
    if isinstance(expected_value, str):
        return [expected_value]
    if isinstance(expected_value, (list, tuple, set, frozenset)):
        if not all(isinstance(tag, str) for tag in expected_value):
            raise ValueError(f"criteria `{attribute_name}` must contain only strings")
        return sorted(expected_value) if isinstance(expected_value, (set, frozenset)) else list(expected_value)
    raise ValueError(f"criteria `{attribute_name}` must be a string or a list of strings")
