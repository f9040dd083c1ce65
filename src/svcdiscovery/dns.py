"""DNS SRV resolver: first SRV record -> proto://target:port."""
from __future__ import annotations

import random
from dataclasses import dataclass
from itertools import groupby
from typing import Optional

import dns.resolver
import structlog

from svcdiscovery.errors import InvalidConfiguration, LookupFailed, NoRecordFound
from svcdiscovery.protocol import SRVLookup
from svcdiscovery.url import ServiceURL

logger = structlog.get_logger(__name__)

PROTOCOLS = ("tcp", "udp")


@dataclass(frozen=True)
class SRVRecord:
    """One SRV answer: target host, port, priority, weight."""

    target: str
    port: int
    priority: int = 0
    weight: int = 0


def _shuffle_by_weight(records: list[SRVRecord], rng: random.Random) -> list[SRVRecord]:
    """RFC 2782 weighted selection order within one priority tier."""
    pending = list(records)
    ordered: list[SRVRecord] = []
    total = sum(r.weight for r in pending)
    while total > 0 and len(pending) > 1:
        n = rng.randrange(total)
        running = 0
        for i, record in enumerate(pending):
            running += record.weight
            if running > n:
                break
        chosen = pending.pop(i)
        ordered.append(chosen)
        total -= chosen.weight
    return ordered + pending


def sort_srv_records(records: list[SRVRecord], rng: Optional[random.Random] = None) -> list[SRVRecord]:
    """Sort by priority ascending, weight-randomized within each priority."""
    rng = rng or random.Random()
    by_priority = sorted(records, key=lambda r: (r.priority, r.weight))
    result: list[SRVRecord] = []
    for _, tier in groupby(by_priority, key=lambda r: r.priority):
        result.extend(_shuffle_by_weight(list(tier), rng))
    return result


class NetSRVLookup:
    """SRV lookup over the network via dnspython; system resolver config is read on first lookup."""

    def __init__(
        self,
        resolver: Optional[dns.resolver.Resolver] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._resolver = resolver
        self._rng = rng or random.Random()

    def lookup_srv(self, service: str, proto: str, name: str) -> tuple[str, list[SRVRecord]]:
        if service == "" and proto == "":
            qname = name
        else:
            qname = f"_{service}._{proto}.{name}"
        resolver = self._resolver if self._resolver is not None else dns.resolver.get_default_resolver()
        answer = resolver.resolve(qname, "SRV")
        records = [
            SRVRecord(
                target=rdata.target.to_text(),
                port=rdata.port,
                priority=rdata.priority,
                weight=rdata.weight,
            )
            for rdata in answer
        ]
        cname = answer.canonical_name.to_text() if answer.canonical_name is not None else qname
        return cname, sort_srv_records(records, self._rng)


class DNSResolver:
    """
    Resolver backed by SRV records. port_name is the SRV service, service_name the domain.
    Takes the first record as ordered by the lookup; no re-sorting, no retry.
    """

    def __init__(self, lookup: SRVLookup, proto: str = "tcp") -> None:
        if proto not in PROTOCOLS:
            raise InvalidConfiguration(
                f'invalid argument "proto" is given - expected "tcp" or "udp", got "{proto}"'
            )
        self._lookup = lookup
        self._proto = proto

    @property
    def proto(self) -> str:
        return self._proto

    def resolve(self, port_name: str, service_name: str) -> ServiceURL:
        query = {"port_name": port_name, "service_name": service_name}
        try:
            _, records = self._lookup.lookup_srv(port_name, self._proto, service_name)
        except Exception as e:
            logger.debug("srv_lookup_failed", proto=self._proto, error=str(e), **query)
            raise LookupFailed(e, **query) from e
        if not records:
            raise NoRecordFound(**query)
        record = records[0]
        logger.debug("srv_lookup", proto=self._proto, target=record.target, port=record.port, **query)
        return ServiceURL(scheme=self._proto, host=f"{record.target}:{record.port}")

    def __repr__(self) -> str:
        return f"DNSResolver(proto={self._proto!r})"
