from origin_gateway.tenancy.registry import (
    DEFAULT_TENANTS,
    TenantDescriptor,
    TenantRegistry,
    get_tenant_registry,
    resolve_tenant,
)

__all__ = [
    "DEFAULT_TENANTS",
    "TenantDescriptor",
    "TenantRegistry",
    "get_tenant_registry",
    "resolve_tenant",
]
