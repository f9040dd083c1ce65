"""Discovery errors: configuration errors at construction, resolution errors at call time."""
from __future__ import annotations

from typing import Optional, Sequence

from svcdiscovery.url import ServiceURL


class DiscoveryError(Exception):
    """Base error: code + human readable message."""

    code = "DISCOVERY_ERROR"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"[{self.code}] {message}")


class InvalidConfiguration(DiscoveryError, ValueError):
    """Resolver cannot be built from the given arguments."""

    code = "INVALID_CONFIGURATION"


class ResolutionError(DiscoveryError):
    """
    Resolve failed. port_name/service_name identify the query.
    url is set when a resolver produced a URL alongside the failure.
    """

    code = "RESOLUTION_FAILED"

    def __init__(
        self,
        message: str,
        *,
        port_name: str = "",
        service_name: str = "",
        url: Optional[ServiceURL] = None,
    ) -> None:
        self.port_name = port_name
        self.service_name = service_name
        self.url = url
        super().__init__(message)


class LookupFailed(ResolutionError):
    code = "LOOKUP_FAILED"

    def __init__(self, cause: BaseException, **kwargs) -> None:
        self.cause = cause
        super().__init__(f"failed to lookup SRV DNS record: {cause}", **kwargs)


class NoRecordFound(ResolutionError):
    code = "NO_RECORD_FOUND"

    def __init__(self, **kwargs) -> None:
        super().__init__("record is not found", **kwargs)


class HostNotConfigured(ResolutionError):
    code = "HOST_NOT_CONFIGURED"

    def __init__(self, variable: str, *, service_name: str, port_name: str = "") -> None:
        self.variable = variable
        super().__init__(
            f'failed to find service({service_name}) host: "{variable}" environment variable is not set',
            port_name=port_name,
            service_name=service_name,
        )


class PortNotConfigured(ResolutionError):
    code = "PORT_NOT_CONFIGURED"

    def __init__(self, variable: str, *, service_name: str, port_name: str) -> None:
        self.variable = variable
        super().__init__(
            f'failed to find service({service_name}) port({port_name}): "{variable}" environment variable is not set',
            port_name=port_name,
            service_name=service_name,
        )


class AllResolversFailed(ResolutionError):
    """Every resolver of a fallback chain failed; errors keeps them in attempt order."""

    code = "ALL_RESOLVERS_FAILED"

    def __init__(self, errors: Sequence[ResolutionError], *, port_name: str, service_name: str) -> None:
        self.errors = list(errors)
        details = "\n".join(str(e) for e in self.errors)
        super().__init__(
            f'failed to resolve "{service_name}" with the given port "{port_name}" URL: '
            f"all resolvers are failed with errors: \n{details}",
            port_name=port_name,
            service_name=service_name,
        )


class TooManyAttempts(ResolutionError):
    code = "TOO_MANY_ATTEMPTS"

    def __init__(self, limit: int, **kwargs) -> None:
        self.limit = limit
        super().__init__(f"failed to call resolve: maximum number of calls ({limit}) exceeded", **kwargs)
