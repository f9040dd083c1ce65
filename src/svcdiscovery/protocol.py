"""Resolver protocols: resolve(port_name, service_name) -> ServiceURL, plus the lookups resolvers consume."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from svcdiscovery.dns import SRVRecord
    from svcdiscovery.url import ServiceURL


@runtime_checkable
class Resolver(Protocol):
    """
    How to find a service by port name. Implementations: DNS, environment,
    fallback chain, scheme decorator, or the user's own.
    """

    def resolve(self, port_name: str, service_name: str) -> ServiceURL:
        """Return the service URL or raise ResolutionError."""
        ...


@runtime_checkable
class SRVLookup(Protocol):
    """
    DNS SRV lookup of service, proto ("tcp" or "udp") and domain name.
    Records come back sorted by priority and weight-randomized within a priority.
    """

    def lookup_srv(self, service: str, proto: str, name: str) -> tuple[str, list[SRVRecord]]:
        ...


@runtime_checkable
class EnvironmentStore(Protocol):
    """Read-only key -> value store (os.environ or a plain dict)."""

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        ...
