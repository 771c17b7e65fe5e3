from __future__ import annotations

from typing import Any

from origin_gateway.normalization.result import NormalizedResult
from origin_gateway.services.base import OriginService
from origin_gateway.tenancy.registry import TenantDescriptor


class CommentsService(OriginService):
    """Comments live per tenant database; the tenant code is a path segment."""

    async def list_public(
        self,
        *,
        tenant: TenantDescriptor | str | None = None,
        page: int | None = None,
        commentable_id: int | str | None = None,
        commentable_type: str | None = None,
    ) -> NormalizedResult[list[Any]]:
        return await self.fetch_list(
            "comments.list_public",
            tenant=tenant,
            query={"page": page, "commentable_id": commentable_id, "commentable_type": commentable_type},
        )

    async def list_dashboard(
        self,
        *,
        tenant: TenantDescriptor | str | None = None,
        page: int | None = None,
        per_page: int | None = None,
        q: str | None = None,
        type: str | None = None,  # noqa: A002
    ) -> NormalizedResult[list[Any]]:
        return await self.fetch_list(
            "comments.list_dashboard",
            tenant=tenant,
            query={"page": page, "per_page": per_page, "q": q, "type": type},
        )
