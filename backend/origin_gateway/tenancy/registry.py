from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import lru_cache
import json
import logging
import re
from types import MappingProxyType

from origin_gateway.core.settings import get_settings


logger = logging.getLogger(__name__)

_TENANT_CODE_PATTERN = re.compile(r"^[a-z]{2,3}$")


@dataclass(frozen=True)
class TenantDescriptor:
    code: str
    id: str
    name: str


DEFAULT_TENANTS: tuple[TenantDescriptor, ...] = (
    TenantDescriptor(code="jo", id="1", name="الأردن"),
    TenantDescriptor(code="sa", id="2", name="السعودية"),
    TenantDescriptor(code="eg", id="3", name="مصر"),
    TenantDescriptor(code="ps", id="4", name="فلسطين"),
)


def normalize_tenant_code(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    candidate = value.strip().lower()
    if not _TENANT_CODE_PATTERN.match(candidate):
        return None
    return candidate


class TenantRegistry:
    """Immutable code/id lookup for origin partitions.

    The first registered tenant is the default. Lookups never fail: absent,
    malformed or unknown input resolves to the default tenant.
    """

    def __init__(self, tenants: Iterable[TenantDescriptor]) -> None:
        entries = tuple(tenants)
        if not entries:
            raise ValueError("Tenant registry requires at least one tenant.")
        by_code: dict[str, TenantDescriptor] = {}
        by_id: dict[str, TenantDescriptor] = {}
        for tenant in entries:
            if not tenant.code.strip() or not tenant.id.strip():
                raise ValueError(f"Tenant entries require a non-empty code and id: {tenant!r}")
            if normalize_tenant_code(tenant.code) != tenant.code:
                raise ValueError(f"Tenant code must be 2-3 lowercase letters: {tenant.code!r}")
            if tenant.code in by_code:
                raise ValueError(f"Duplicate tenant code: {tenant.code}")
            if tenant.id in by_id:
                raise ValueError(f"Duplicate tenant id: {tenant.id}")
            by_code[tenant.code] = tenant
            by_id[tenant.id] = tenant
        self._entries = entries
        self._by_code = MappingProxyType(by_code)
        self._by_id = MappingProxyType(by_id)

    @property
    def default(self) -> TenantDescriptor:
        return self._entries[0]

    def resolve(self, code: object = None) -> TenantDescriptor:
        normalized = normalize_tenant_code(code)
        tenant = self._by_code.get(normalized) if normalized is not None else None
        if tenant is None:
            logger.debug("tenant.fallback", extra={"tenant_code": self.default.code})
            return self.default
        return tenant

    def resolve_id(self, tenant_id: object = None) -> TenantDescriptor:
        if isinstance(tenant_id, int) and not isinstance(tenant_id, bool):
            tenant_id = str(tenant_id)
        tenant = self._by_id.get(tenant_id.strip()) if isinstance(tenant_id, str) else None
        if tenant is None:
            logger.debug("tenant.fallback", extra={"tenant_code": self.default.code})
            return self.default
        return tenant

    def codes(self) -> tuple[str, ...]:
        return tuple(tenant.code for tenant in self._entries)

    def __iter__(self) -> Iterator[TenantDescriptor]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, code: object) -> bool:
        normalized = normalize_tenant_code(code)
        return normalized is not None and normalized in self._by_code


def parse_tenant_registry_json(raw: str) -> tuple[TenantDescriptor, ...]:
    try:
        rows = json.loads(raw)
    except ValueError as exc:
        raise ValueError("TENANT_REGISTRY_JSON is not valid JSON.") from exc
    if not isinstance(rows, list):
        raise ValueError("TENANT_REGISTRY_JSON must be a JSON array.")
    tenants: list[TenantDescriptor] = []
    for row in rows:
        if not isinstance(row, dict):
            raise ValueError("TENANT_REGISTRY_JSON entries must be objects.")
        tenants.append(
            TenantDescriptor(
                code=str(row.get("code", "")).strip(),
                id=str(row.get("id", "")).strip(),
                name=str(row.get("name", "")).strip(),
            )
        )
    return tuple(tenants)


@lru_cache
def get_tenant_registry() -> TenantRegistry:
    raw = get_settings().tenant_registry_json.strip()
    if raw:
        return TenantRegistry(parse_tenant_registry_json(raw))
    return TenantRegistry(DEFAULT_TENANTS)


def resolve_tenant(code: object = None) -> TenantDescriptor:
    return get_tenant_registry().resolve(code)
