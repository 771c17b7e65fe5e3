from __future__ import annotations

from typing import Any

from origin_gateway.normalization.result import NormalizedResult
from origin_gateway.services.base import OriginService
from origin_gateway.tenancy.registry import TenantDescriptor
from origin_gateway.transport.types import CacheHints


class ArticlesService(OriginService):
    async def get_public(
        self,
        article_id: int | str,
        *,
        tenant: TenantDescriptor | str | None = None,
        cache_hints: CacheHints | None = None,
    ) -> NormalizedResult[Any]:
        return await self.fetch(
            "articles.show_public",
            tenant=tenant,
            path_params={"id": article_id},
            cache_hints=cache_hints,
        )

    async def get(self, article_id: int | str, *, tenant: TenantDescriptor | str | None = None) -> NormalizedResult[Any]:
        return await self.fetch("articles.show", tenant=tenant, path_params={"id": article_id})

    async def list(
        self,
        *,
        tenant: TenantDescriptor | str | None = None,
        page: int | None = None,
        per_page: int | None = None,
        q: str | None = None,
        subject_id: int | None = None,
        semester_id: int | None = None,
        status: bool | None = None,
    ) -> NormalizedResult[list[Any]]:
        return await self.fetch_list(
            "articles.list",
            tenant=tenant,
            query={
                "page": page,
                "per_page": per_page,
                "q": q,
                "subject_id": subject_id,
                "semester_id": semester_id,
                "status": status,
            },
        )

    async def stats(self, *, tenant: TenantDescriptor | str | None = None) -> NormalizedResult[Any]:
        return await self.fetch("articles.stats", tenant=tenant)

    async def by_keyword(
        self,
        keyword: str,
        *,
        tenant: TenantDescriptor | str | None = None,
        page: int | None = None,
    ) -> NormalizedResult[list[Any]]:
        return await self.fetch_list(
            "articles.by_keyword",
            tenant=tenant,
            path_params={"keyword": keyword},
            query={"page": page},
        )
