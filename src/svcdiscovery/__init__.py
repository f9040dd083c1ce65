"""
svcdiscovery — resolve a service port name to a URL.
Resolvers (DNS SRV, environment) are composed via FallbackResolver and SchemeDecorator,
or built with DiscoveryModule.
"""
from svcdiscovery.config import DiscoveryConfig
from svcdiscovery.decorator import SchemeDecorator
from svcdiscovery.discovery_module import DiscoveryModule, ResolverDiscovery
from svcdiscovery.dns import DNSResolver, NetSRVLookup, SRVRecord
from svcdiscovery.env import EnvResolver, normalize_name
from svcdiscovery.errors import (
    AllResolversFailed,
    DiscoveryError,
    HostNotConfigured,
    InvalidConfiguration,
    LookupFailed,
    NoRecordFound,
    PortNotConfigured,
    ResolutionError,
    TooManyAttempts,
)
from svcdiscovery.fallback import MAX_ATTEMPTS, MAX_DEPTH, FallbackResolver
from svcdiscovery.protocol import EnvironmentStore, Resolver, SRVLookup
from svcdiscovery.url import ServiceURL

__all__ = [
    "Resolver",
    "SRVLookup",
    "EnvironmentStore",
    "ServiceURL",
    "DNSResolver",
    "NetSRVLookup",
    "SRVRecord",
    "EnvResolver",
    "normalize_name",
    "FallbackResolver",
    "MAX_ATTEMPTS",
    "MAX_DEPTH",
    "SchemeDecorator",
    "DiscoveryModule",
    "ResolverDiscovery",
    "DiscoveryConfig",
    "DiscoveryError",
    "InvalidConfiguration",
    "ResolutionError",
    "LookupFailed",
    "NoRecordFound",
    "HostNotConfigured",
    "PortNotConfigured",
    "AllResolversFailed",
    "TooManyAttempts",
]
