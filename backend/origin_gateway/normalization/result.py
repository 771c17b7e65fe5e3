from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from origin_gateway.normalization.envelope import (
    LinkSet,
    PaginationMeta,
    extract_error_message,
    extract_links,
    extract_meta,
    extract_validation_errors,
    is_success_response,
    unwrap_array_response,
    unwrap_response,
)


T = TypeVar("T")


@dataclass(frozen=True)
class NormalizedResult(Generic[T]):
    data: T
    meta: PaginationMeta | None = None
    links: LinkSet | None = None
    success: bool = False
    error_message: str | None = None
    field_errors: dict[str, Any] = field(default_factory=dict)

    @property
    def has_errors(self) -> bool:
        return bool(self.field_errors) or (not self.success and self.error_message is not None)

    @property
    def is_paginated(self) -> bool:
        return self.meta is not None


def normalize(raw: Any) -> NormalizedResult[Any]:
    return NormalizedResult(
        data=unwrap_response(raw),
        meta=extract_meta(raw),
        links=extract_links(raw),
        success=is_success_response(raw),
        error_message=extract_error_message(raw),
        field_errors=extract_validation_errors(raw),
    )


def normalize_list(raw: Any) -> NormalizedResult[list[Any]]:
    return NormalizedResult(
        data=unwrap_array_response(raw),
        meta=extract_meta(raw),
        links=extract_links(raw),
        success=is_success_response(raw),
        error_message=extract_error_message(raw),
        field_errors=extract_validation_errors(raw),
    )
