from __future__ import annotations

from typing import Any

from origin_gateway.normalization.result import NormalizedResult
from origin_gateway.services.base import OriginService


class RolesService(OriginService):
    async def list(self, *, page: int | None = None, per_page: int | None = None) -> NormalizedResult[list[Any]]:
        return await self.fetch_list("roles.list", query={"page": page, "per_page": per_page})

    async def get(self, role_id: int | str) -> NormalizedResult[Any]:
        return await self.fetch("roles.show", path_params={"id": role_id})

    async def permissions(self, *, page: int | None = None, per_page: int | None = None) -> NormalizedResult[list[Any]]:
        return await self.fetch_list("permissions.list", query={"page": page, "per_page": per_page})
