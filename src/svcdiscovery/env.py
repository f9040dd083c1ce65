"""Environment resolver: {SERVICE}_SERVICE_HOST and {SERVICE}_SERVICE_PORT_{PORT} -> host:port."""
from __future__ import annotations

import os
import re
from typing import Optional

import structlog

from svcdiscovery.errors import HostNotConfigured, PortNotConfigured
from svcdiscovery.protocol import EnvironmentStore
from svcdiscovery.url import ServiceURL

logger = structlog.get_logger(__name__)

_INVALID_CHARS = re.compile(r"[^a-zA-Z0-9_]+")


def _upper(c: str) -> str:
    # single-character mapping only: "ß" stays "ß"
    upper = c.upper()
    return upper if len(upper) == 1 else c


def normalize_name(name: str) -> str:
    """srv-name -> SRV_NAME; anything outside [A-Za-z0-9_] is dropped."""
    upper = "".join(_upper(c) for c in name.replace("-", "_"))
    return _INVALID_CHARS.sub("", upper)


def host_variable(service_name: str) -> str:
    return f"{normalize_name(service_name)}_SERVICE_HOST"


def port_variable(port_name: str, service_name: str) -> str:
    return f"{normalize_name(service_name)}_SERVICE_PORT_{normalize_name(port_name)}"


class EnvResolver:
    """
    Resolver from environment variables (Kubernetes-style service links).
    The returned URL has no scheme; a SchemeDecorator or the caller assigns one.
    """

    def __init__(self, store: Optional[EnvironmentStore] = None) -> None:
        self._store = store if store is not None else os.environ

    def resolve(self, port_name: str, service_name: str) -> ServiceURL:
        host_var = host_variable(service_name)
        port_var = port_variable(port_name, service_name)

        host = self._store.get(host_var)
        if not host:
            raise HostNotConfigured(host_var, service_name=service_name, port_name=port_name)

        port = self._store.get(port_var)
        if not port:
            raise PortNotConfigured(port_var, service_name=service_name, port_name=port_name)

        logger.debug("env_lookup", host_variable=host_var, port_variable=port_var, host=host, port=port)
        return ServiceURL(host=f"{host}:{port}")

    def __repr__(self) -> str:
        return "EnvResolver()"
