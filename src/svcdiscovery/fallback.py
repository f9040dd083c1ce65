"""Fallback resolver: try resolvers in order, first success wins."""
from __future__ import annotations

from contextvars import ContextVar

import structlog

from svcdiscovery.errors import AllResolversFailed, InvalidConfiguration, ResolutionError, TooManyAttempts
from svcdiscovery.protocol import Resolver
from svcdiscovery.url import ServiceURL

logger = structlog.get_logger(__name__)

MAX_ATTEMPTS = 128
MAX_DEPTH = 128

# How deep fallback resolvers are nested in the current resolve call.
_depth: ContextVar[int] = ContextVar("svcdiscovery_fallback_depth", default=0)


class FallbackResolver:
    """
    Ordered chain of resolvers. Exactly one attempt per resolver per call;
    failures are collected and reported together if none succeeds.

    max_attempts bounds the attempts of this chain alone. Composition is not
    checked for cycles: a chain that contains itself (directly or through
    other resolvers) stops with TooManyAttempts once fallback resolvers are
    nested more than max_depth deep in one call.
    """

    def __init__(self, *resolvers: Resolver, max_attempts: int = MAX_ATTEMPTS, max_depth: int = MAX_DEPTH) -> None:
        if not resolvers:
            raise InvalidConfiguration("at least one resolver is expected")
        if max_attempts < 1:
            raise InvalidConfiguration(f"max_attempts must be positive, got {max_attempts}")
        if max_depth < 1:
            raise InvalidConfiguration(f"max_depth must be positive, got {max_depth}")
        self._resolvers: tuple[Resolver, ...] = tuple(resolvers)
        self._max_attempts = max_attempts
        self._max_depth = max_depth

    @property
    def resolvers(self) -> tuple[Resolver, ...]:
        return self._resolvers

    def resolve(self, port_name: str, service_name: str) -> ServiceURL:
        depth = _depth.get() + 1
        if depth > self._max_depth:
            logger.warning("fallback_depth_exceeded", limit=self._max_depth, port_name=port_name, service_name=service_name)
            raise TooManyAttempts(self._max_depth, port_name=port_name, service_name=service_name)
        token = _depth.set(depth)
        try:
            return self._resolve(port_name, service_name)
        finally:
            _depth.reset(token)

    def _resolve(self, port_name: str, service_name: str) -> ServiceURL:
        failures: list[ResolutionError] = []
        for attempt, resolver in enumerate(self._resolvers, start=1):
            if attempt > self._max_attempts:
                logger.warning(
                    "fallback_attempts_exceeded",
                    limit=self._max_attempts,
                    port_name=port_name,
                    service_name=service_name,
                )
                raise TooManyAttempts(self._max_attempts, port_name=port_name, service_name=service_name)
            try:
                return resolver.resolve(port_name, service_name)
            except TooManyAttempts:
                raise
            except ResolutionError as e:
                logger.debug("fallback_resolver_failed", resolver=repr(resolver), error=e.message)
                failures.append(e)
        raise AllResolversFailed(failures, port_name=port_name, service_name=service_name)

    def __repr__(self) -> str:
        return f"FallbackResolver({len(self._resolvers)} resolvers)"
