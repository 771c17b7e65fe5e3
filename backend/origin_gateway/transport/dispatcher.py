from __future__ import annotations

from collections.abc import Mapping
import logging
import time
from typing import Any

import httpx

from origin_gateway.core.settings import Settings, get_settings
from origin_gateway.endpoints.catalog import get_endpoint_table
from origin_gateway.endpoints.table import (
    TENANT_PATH_PARAM,
    TENANT_QUERY_PARAM,
    EndpointTable,
    TenantPlacement,
)
from origin_gateway.tenancy.registry import TenantDescriptor, TenantRegistry, get_tenant_registry
from origin_gateway.transport.errors import (
    EndpointConfigurationError,
    OriginResponseFormatError,
    classify_transport_error,
)
from origin_gateway.transport.types import CacheHints, PreparedRequest


logger = logging.getLogger(__name__)

QueryValue = str | int | float | bool | None


def _encode_query_value(value: str | int | float | bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class RequestDispatcher:
    """Builds tenant-scoped origin requests and returns their JSON bodies.

    Error envelopes on non-2xx responses are returned like any other body so
    the normalizer can read them. Only failures that leave no JSON body to
    read raise, as ``OriginTransportError`` subclasses.
    """

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        tenants: TenantRegistry | None = None,
        endpoints: EndpointTable | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._tenants = tenants or get_tenant_registry()
        self._endpoints = endpoints or get_endpoint_table()
        self._transport = transport

    @property
    def tenants(self) -> TenantRegistry:
        return self._tenants

    @property
    def endpoints(self) -> EndpointTable:
        return self._endpoints

    def resolve_tenant(self, tenant: TenantDescriptor | str | None) -> TenantDescriptor:
        if isinstance(tenant, TenantDescriptor):
            tenant = tenant.code
        return self._tenants.resolve(tenant)

    def prepare(
        self,
        operation: str,
        *,
        tenant: TenantDescriptor | str | None = None,
        path_params: Mapping[str, str | int] | None = None,
        query: Mapping[str, QueryValue] | None = None,
        cache_hints: CacheHints | None = None,
        json: Any = None,
    ) -> PreparedRequest:
        descriptor = self._endpoints.get(operation)
        resolved = self.resolve_tenant(tenant)

        path_values: dict[str, str | int] = dict(path_params or {})
        if descriptor.tenant_placement == TenantPlacement.PATH:
            path_values[TENANT_PATH_PARAM] = resolved.code
        path = self._endpoints.build(operation, path_values)

        params: dict[str, str] = {}
        for key, value in (query or {}).items():
            if value is None:
                continue
            if key not in descriptor.query_params:
                raise EndpointConfigurationError(f"Endpoint {operation} does not accept query parameter: {key}")
            params[key] = _encode_query_value(value)
        if descriptor.tenant_placement == TenantPlacement.QUERY_ID:
            params[TENANT_QUERY_PARAM] = resolved.id
        elif descriptor.tenant_placement == TenantPlacement.QUERY_CODE:
            params[TENANT_QUERY_PARAM] = resolved.code

        headers = self._base_headers()
        if descriptor.tenant_placement == TenantPlacement.HEADER:
            headers["X-Country-Id"] = resolved.id
            headers["X-Country-Code"] = resolved.code
        if json is not None:
            headers["Content-Type"] = "application/json"
        if cache_hints is not None:
            cache_control = cache_hints.cache_control()
            if cache_control:
                headers["Cache-Control"] = cache_control

        return PreparedRequest(
            operation=operation,
            method=descriptor.method,
            path=path,
            tenant=resolved,
            params=params,
            headers=headers,
            json=json,
        )

    def _base_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "X-Requested-With": "XMLHttpRequest",
            "X-App-Locale": self._settings.origin_locale,
        }
        if self._settings.origin_frontend_api_key.strip():
            headers["X-Frontend-Key"] = self._settings.origin_frontend_api_key.strip()
        if self._settings.origin_api_hostname.strip():
            headers["Host"] = self._settings.origin_api_hostname.strip()
        return headers

    async def dispatch(
        self,
        operation: str,
        *,
        tenant: TenantDescriptor | str | None = None,
        path_params: Mapping[str, str | int] | None = None,
        query: Mapping[str, QueryValue] | None = None,
        cache_hints: CacheHints | None = None,
        json: Any = None,
    ) -> Any:
        prepared = self.prepare(
            operation,
            tenant=tenant,
            path_params=path_params,
            query=query,
            cache_hints=cache_hints,
            json=json,
        )
        return await self.send(prepared)

    async def send(self, prepared: PreparedRequest) -> Any:
        log_fields = {
            "operation": prepared.operation,
            "tenant_code": prepared.tenant.code,
            "method": prepared.method,
            "path": prepared.path,
        }
        start = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                base_url=self._settings.origin_api_base_url,
                timeout=self._settings.origin_request_timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    prepared.method,
                    prepared.path,
                    params=prepared.params,
                    headers=prepared.headers,
                    json=prepared.json,
                )
        except httpx.HTTPError as exc:
            error = classify_transport_error(exc)
            logger.warning("origin.request.failed", extra={**log_fields, "error_code": error.error_code})
            raise error from exc

        duration_ms = int((time.perf_counter() - start) * 1000)
        log_fields = {**log_fields, "status_code": response.status_code, "duration_ms": duration_ms}
        if response.is_success:
            logger.debug("origin.request.finished", extra=log_fields)
        else:
            logger.warning("origin.request.non_success", extra=log_fields)
        return _decode_body(response, prepared.operation)


def _decode_body(response: httpx.Response, operation: str) -> Any:
    if not response.content.strip():
        if response.is_success:
            return None
        raise OriginResponseFormatError(
            f"Origin returned status {response.status_code} with an empty body: {operation}",
            status_code=response.status_code,
        )
    try:
        return response.json()
    except ValueError as exc:
        raise OriginResponseFormatError(
            f"Origin returned a body that is not valid JSON: {operation}",
            status_code=response.status_code,
            upstream_payload=response.text[:500],
        ) from exc
