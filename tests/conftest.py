"""Pytest fixtures: fake SRV lookups and resolvers, no network."""
from typing import Callable, Optional

import pytest

from svcdiscovery import ResolutionError, ServiceURL, SRVRecord
from svcdiscovery.log_config import configure_logging

configure_logging("WARNING")


class FakeSRVLookup:
    """Returns canned records (or raises) and remembers the queries."""

    def __init__(self, records: Optional[list] = None, error: Optional[Exception] = None) -> None:
        self.records = records or []
        self.error = error
        self.calls: list[tuple[str, str, str]] = []

    def lookup_srv(self, service: str, proto: str, name: str):
        self.calls.append((service, proto, name))
        if self.error is not None:
            raise self.error
        return f"_{service}._{proto}.{name}.", list(self.records)


class StubResolver:
    """Resolver returning a fixed URL or raising a fixed error; counts calls."""

    def __init__(self, url: Optional[ServiceURL] = None, error: Optional[Exception] = None) -> None:
        self.url = url
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def resolve(self, port_name: str, service_name: str) -> ServiceURL:
        self.calls.append((port_name, service_name))
        if self.error is not None:
            raise self.error
        return self.url

    def __repr__(self) -> str:
        return f"StubResolver({self.url!r}, {self.error!r})"


@pytest.fixture
def srv_records() -> list:
    return [
        SRVRecord(target="domain.svc.local.", port=12308, priority=0, weight=100),
        SRVRecord(target="domain.svc.local.", port=9999, priority=0, weight=100),
    ]


@pytest.fixture
def fake_lookup() -> Callable[..., FakeSRVLookup]:
    return FakeSRVLookup


@pytest.fixture
def ok_resolver() -> Callable[[str], StubResolver]:
    def make(host: str = "example.com:12345", scheme: str = "tcp") -> StubResolver:
        return StubResolver(url=ServiceURL(scheme=scheme, host=host))
    return make


@pytest.fixture
def failing_resolver() -> Callable[[str], StubResolver]:
    def make(message: str = "constant error") -> StubResolver:
        return StubResolver(error=ResolutionError(message))
    return make
