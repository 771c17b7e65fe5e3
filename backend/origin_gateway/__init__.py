"""Tenant-aware client and response normalizer for the content origin API."""

from origin_gateway.normalization import NormalizedResult, normalize, normalize_list
from origin_gateway.tenancy import TenantDescriptor, resolve_tenant
from origin_gateway.transport.dispatcher import RequestDispatcher
from origin_gateway.transport.types import CacheHints

__all__ = [
    "CacheHints",
    "NormalizedResult",
    "RequestDispatcher",
    "TenantDescriptor",
    "normalize",
    "normalize_list",
    "resolve_tenant",
]
