"""Scheme decorator: rewrite the resolved URL scheme by port name."""
from __future__ import annotations

from typing import Mapping

import structlog

from svcdiscovery.errors import ResolutionError
from svcdiscovery.protocol import Resolver
from svcdiscovery.url import ServiceURL

logger = structlog.get_logger(__name__)


class SchemeDecorator:
    """
    Wraps one resolver. If port_name is mapped, the URL gets the mapped scheme,
    whatever scheme the inner resolver gave it. Errors pass through untouched;
    a URL carried by a ResolutionError is rewritten as well.
    """

    def __init__(self, inner: Resolver, port_name_schemes: Mapping[str, str]) -> None:
        self._inner = inner
        self._schemes = dict(port_name_schemes)

    @property
    def inner(self) -> Resolver:
        return self._inner

    @property
    def schemes(self) -> Mapping[str, str]:
        return dict(self._schemes)

    def resolve(self, port_name: str, service_name: str) -> ServiceURL:
        if port_name not in self._schemes:
            return self._inner.resolve(port_name, service_name)
        scheme = self._schemes[port_name]
        try:
            url = self._inner.resolve(port_name, service_name)
        except ResolutionError as e:
            if e.url is not None:
                e.url = e.url.with_scheme(scheme)
            raise
        if url is None:
            return url
        logger.debug("scheme_rewritten", port_name=port_name, old=url.scheme, new=scheme)
        return url.with_scheme(scheme)

    def __repr__(self) -> str:
        return f"SchemeDecorator({self._inner!r}, {self._schemes!r})"
