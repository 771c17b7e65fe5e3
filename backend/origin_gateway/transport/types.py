from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from origin_gateway.tenancy.registry import TenantDescriptor


@dataclass(frozen=True)
class CacheHints:
    no_store: bool = False
    max_age_seconds: int | None = None

    def cache_control(self) -> str | None:
        if self.no_store:
            return "no-store"
        if self.max_age_seconds is not None:
            return f"max-age={max(0, int(self.max_age_seconds))}"
        return None


@dataclass(frozen=True)
class PreparedRequest:
    operation: str
    method: str
    path: str
    tenant: TenantDescriptor
    params: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    json: Any = None
