"""Resolution layer package for service query lookup and fallback merge."""

from .interfaces import ServiceResolution, ServiceResolverPort
from .service import ServiceResolver

__all__ = ["ServiceResolution", "ServiceResolver", "ServiceResolverPort"]
