"""ServiceURL — where to reach a service; value without identity."""
from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ServiceURL:
    """Scheme (may be empty) and host ("host:port"). Equality by fields."""

    scheme: str = ""
    host: str = ""

    def with_scheme(self, scheme: str) -> ServiceURL:
        return replace(self, scheme=scheme)

    def __str__(self) -> str:
        if self.scheme:
            return f"{self.scheme}://{self.host}"
        return f"//{self.host}"
