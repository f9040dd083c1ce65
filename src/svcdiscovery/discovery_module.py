"""
DiscoveryModule — building block for service discovery.
Configure via .dns(...), .env(...), .resolver(...), .schemes(...); then .build() a Resolver.
"""
from __future__ import annotations

from typing import Mapping, Optional

import structlog

from svcdiscovery.config import DiscoveryConfig
from svcdiscovery.decorator import SchemeDecorator
from svcdiscovery.dns import DNSResolver, NetSRVLookup
from svcdiscovery.env import EnvResolver
from svcdiscovery.errors import InvalidConfiguration, ResolutionError
from svcdiscovery.fallback import MAX_ATTEMPTS, FallbackResolver
from svcdiscovery.protocol import EnvironmentStore, Resolver, SRVLookup

logger = structlog.get_logger(__name__)


class DiscoveryModule:
    """
    Discovery as object: an ordered chain of resolvers plus an optional scheme mapping.
    Typical result: SchemeDecorator -> FallbackResolver -> [DNSResolver, EnvResolver].
    """

    def __init__(self) -> None:
        self._resolvers: list[Resolver] = []
        self._schemes: dict[str, str] = {}
        self._max_attempts = MAX_ATTEMPTS

    def dns(self, proto: str = "tcp", lookup: Optional[SRVLookup] = None) -> DiscoveryModule:
        """DNS SRV resolver; lookup defaults to dnspython (NetSRVLookup)."""
        self._resolvers.append(DNSResolver(lookup or NetSRVLookup(), proto))
        return self

    def env(self, store: Optional[EnvironmentStore] = None) -> DiscoveryModule:
        """Environment resolver; store defaults to os.environ."""
        self._resolvers.append(EnvResolver(store))
        return self

    def resolver(self, impl: Resolver) -> DiscoveryModule:
        """Use custom implementation (protocol: resolve(port_name, service_name) -> ServiceURL)."""
        self._resolvers.append(impl)
        return self

    def schemes(self, port_name_schemes: Mapping[str, str]) -> DiscoveryModule:
        self._schemes.update(port_name_schemes)
        return self

    def max_attempts(self, limit: int) -> DiscoveryModule:
        self._max_attempts = limit
        return self

    def build(self) -> Resolver:
        if not self._resolvers:
            raise InvalidConfiguration("at least one resolver is expected")
        if len(self._resolvers) == 1:
            resolver = self._resolvers[0]
        else:
            resolver = FallbackResolver(*self._resolvers, max_attempts=self._max_attempts)
        if self._schemes:
            resolver = SchemeDecorator(resolver, self._schemes)
        return resolver

    @classmethod
    def from_config(
        cls,
        config: DiscoveryConfig,
        *,
        lookup: Optional[SRVLookup] = None,
        store: Optional[EnvironmentStore] = None,
    ) -> DiscoveryModule:
        module = cls().max_attempts(config.max_attempts).schemes(config.schemes)
        for kind in config.resolvers:
            if kind == "dns":
                module.dns(config.proto, lookup)
            elif kind == "env":
                module.env(store)
            else:
                raise InvalidConfiguration(f"unknown resolver {kind!r}")
        return module


class ResolverDiscovery:
    """ServiceDiscovery-style adapter: resolve(service_name) -> [url] for a fixed port name."""

    def __init__(self, resolver: Resolver, port_name: str) -> None:
        self._resolver = resolver
        self._port_name = port_name

    def resolve(self, service_name: str) -> list[str]:
        try:
            url = self._resolver.resolve(self._port_name, service_name)
        except ResolutionError as e:
            logger.debug("service_not_found", port_name=self._port_name, service_name=service_name, error=e.message)
            return []
        return [str(url)]
