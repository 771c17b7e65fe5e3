from origin_gateway.normalization.envelope import (
    DEFAULT_PER_PAGE,
    LinkSet,
    PaginationMeta,
    create_api_response,
    extract_error_message,
    extract_links,
    extract_meta,
    extract_validation_errors,
    is_paginated_response,
    is_success_response,
    unwrap_array_response,
    unwrap_response,
)
from origin_gateway.normalization.result import NormalizedResult, normalize, normalize_list

__all__ = [
    "DEFAULT_PER_PAGE",
    "LinkSet",
    "NormalizedResult",
    "PaginationMeta",
    "create_api_response",
    "extract_error_message",
    "extract_links",
    "extract_meta",
    "extract_validation_errors",
    "is_paginated_response",
    "is_success_response",
    "normalize",
    "normalize_list",
    "unwrap_array_response",
    "unwrap_response",
]
