"""Discovery config: which resolvers, in what order, and port name -> scheme mapping; loaded from env."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from svcdiscovery.errors import InvalidConfiguration
from svcdiscovery.fallback import MAX_ATTEMPTS

RESOLVER_KINDS = ("dns", "env")

_TRUE = {"1", "true", "yes", "on"}


def parse_schemes(value: str) -> dict[str, str]:
    """
    "api=http,private-api=https" -> {"api": "http", "private-api": "https"}.
    Empty items are skipped; an item without "=" or with an empty side is an error.
    """
    out: dict[str, str] = {}
    for item in value.split(","):
        item = item.strip()
        if not item:
            continue
        port_name, sep, scheme = item.partition("=")
        port_name, scheme = port_name.strip(), scheme.strip()
        if not sep or not port_name or not scheme:
            raise InvalidConfiguration(f"invalid scheme mapping {item!r}, expected port=scheme")
        out[port_name] = scheme
    return out


def parse_resolvers(value: str) -> list[str]:
    kinds = [k.strip().lower() for k in value.split(",") if k.strip()]
    for kind in kinds:
        if kind not in RESOLVER_KINDS:
            raise InvalidConfiguration(f"unknown resolver {kind!r}, expected one of {', '.join(RESOLVER_KINDS)}")
    if not kinds:
        raise InvalidConfiguration("at least one resolver is expected")
    return kinds


@dataclass
class DiscoveryConfig:
    """
    Discovery settings. Build directly, or via DiscoveryConfig.load_from_env():
    DISCOVERY_PROTO=tcp, DISCOVERY_RESOLVERS=dns,env, DISCOVERY_SCHEMES=api=http,
    DISCOVERY_MAX_ATTEMPTS=128, DISCOVERY_LOG_LEVEL=WARNING, DISCOVERY_LOG_JSON=false.
    """

    proto: str = "tcp"
    resolvers: list[str] = field(default_factory=lambda: list(RESOLVER_KINDS))
    schemes: dict[str, str] = field(default_factory=dict)
    max_attempts: int = MAX_ATTEMPTS
    log_level: str = "WARNING"
    log_json: bool = False

    @classmethod
    def load_from_env(
        cls,
        prefix: str = "DISCOVERY_",
        environ: Optional[Mapping[str, str]] = None,
        **defaults: Any,
    ) -> DiscoveryConfig:
        """Read prefixed variables from os.environ (or environ); unset ones keep defaults."""
        env = os.environ if environ is None else environ
        values: dict[str, Any] = dict(defaults)

        def get(name: str) -> Optional[str]:
            raw = env.get(prefix + name)
            return raw.strip() if raw and raw.strip() else None

        proto = get("PROTO")
        if proto is not None:
            values["proto"] = proto.lower()
        resolvers = get("RESOLVERS")
        if resolvers is not None:
            values["resolvers"] = parse_resolvers(resolvers)
        schemes = get("SCHEMES")
        if schemes is not None:
            values["schemes"] = parse_schemes(schemes)
        max_attempts = get("MAX_ATTEMPTS")
        if max_attempts is not None:
            try:
                values["max_attempts"] = int(max_attempts)
            except ValueError:
                raise InvalidConfiguration(f"{prefix}MAX_ATTEMPTS must be an integer, got {max_attempts!r}")
        log_level = get("LOG_LEVEL")
        if log_level is not None:
            values["log_level"] = log_level.upper()
        log_json = get("LOG_JSON")
        if log_json is not None:
            values["log_json"] = log_json.lower() in _TRUE
        return cls(**values)
