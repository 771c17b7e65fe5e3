from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Mapping
from typing import Any

from origin_gateway.normalization.result import NormalizedResult, normalize, normalize_list
from origin_gateway.tenancy.registry import TenantDescriptor
from origin_gateway.transport.dispatcher import QueryValue, RequestDispatcher
from origin_gateway.transport.errors import OriginError
from origin_gateway.transport.types import CacheHints


class OriginService:
    def __init__(self, dispatcher: RequestDispatcher | None = None) -> None:
        self._dispatcher = dispatcher or RequestDispatcher()

    @property
    def dispatcher(self) -> RequestDispatcher:
        return self._dispatcher

    async def fetch(
        self,
        operation: str,
        *,
        tenant: TenantDescriptor | str | None = None,
        path_params: Mapping[str, str | int] | None = None,
        query: Mapping[str, QueryValue] | None = None,
        cache_hints: CacheHints | None = None,
        json: Any = None,
    ) -> NormalizedResult[Any]:
        raw = await self._dispatcher.dispatch(
            operation,
            tenant=tenant,
            path_params=path_params,
            query=query,
            cache_hints=cache_hints,
            json=json,
        )
        return normalize(raw)

    async def fetch_list(
        self,
        operation: str,
        *,
        tenant: TenantDescriptor | str | None = None,
        path_params: Mapping[str, str | int] | None = None,
        query: Mapping[str, QueryValue] | None = None,
        cache_hints: CacheHints | None = None,
    ) -> NormalizedResult[list[Any]]:
        raw = await self._dispatcher.dispatch(
            operation,
            tenant=tenant,
            path_params=path_params,
            query=query,
            cache_hints=cache_hints,
        )
        return normalize_list(raw)


async def gather_results(**calls: Awaitable[NormalizedResult[Any]]) -> dict[str, NormalizedResult[Any] | OriginError]:
    """Run independent origin calls concurrently.

    An ``OriginError`` from one call is returned in that call's slot and leaves
    the other results untouched. Any other exception propagates.
    """
    names = list(calls)
    outcomes = await asyncio.gather(*(calls[name] for name in names), return_exceptions=True)
    results: dict[str, NormalizedResult[Any] | OriginError] = {}
    for name, outcome in zip(names, outcomes):
        if isinstance(outcome, BaseException) and not isinstance(outcome, OriginError):
            raise outcome
        results[name] = outcome
    return results
