from __future__ import annotations

from typing import Any, Literal

from origin_gateway.normalization.result import NormalizedResult
from origin_gateway.services.base import OriginService
from origin_gateway.tenancy.registry import TenantDescriptor
from origin_gateway.transport.types import CacheHints


class PostsService(OriginService):
    async def list(
        self,
        *,
        tenant: TenantDescriptor | str | None = None,
        page: int | None = None,
        per_page: int | None = None,
        search: str | None = None,
        category_id: int | str | None = None,
        is_featured: bool | None = None,
        sort_by: str | None = None,
        sort_dir: Literal["asc", "desc"] | None = None,
        cache_hints: CacheHints | None = None,
    ) -> NormalizedResult[list[Any]]:
        return await self.fetch_list(
            "posts.list",
            tenant=tenant,
            query={
                "page": page,
                "per_page": per_page,
                "search": search,
                "category_id": category_id,
                "is_featured": is_featured,
                "sort_by": sort_by,
                "sort_dir": sort_dir,
            },
            cache_hints=cache_hints,
        )

    async def get(self, post_id: int | str, *, tenant: TenantDescriptor | str | None = None) -> NormalizedResult[Any]:
        return await self.fetch("posts.show", tenant=tenant, path_params={"id": post_id})
