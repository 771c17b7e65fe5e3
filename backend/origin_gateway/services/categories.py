from __future__ import annotations

from typing import Any

from origin_gateway.normalization.result import NormalizedResult
from origin_gateway.services.base import OriginService
from origin_gateway.tenancy.registry import TenantDescriptor


class CategoriesService(OriginService):
    async def list(
        self,
        *,
        tenant: TenantDescriptor | str | None = None,
        page: int | None = None,
        per_page: int | None = None,
        q: str | None = None,
    ) -> NormalizedResult[list[Any]]:
        return await self.fetch_list(
            "categories.list",
            tenant=tenant,
            query={"page": page, "per_page": per_page, "q": q},
        )

    async def get(self, category_id: int | str, *, tenant: TenantDescriptor | str | None = None) -> NormalizedResult[Any]:
        return await self.fetch("categories.show", tenant=tenant, path_params={"id": category_id})

    async def create(self, payload: dict[str, Any], *, tenant: TenantDescriptor | str | None = None) -> NormalizedResult[Any]:
        return await self.fetch("categories.store", tenant=tenant, json=payload)
