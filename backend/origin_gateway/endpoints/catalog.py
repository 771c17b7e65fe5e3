from __future__ import annotations

from functools import lru_cache

from origin_gateway.endpoints.table import (
    PAGINATION_PARAMS,
    EndpointDescriptor,
    EndpointTable,
    TenantPlacement,
)


_LISTING = PAGINATION_PARAMS | {"q", "search", "sort_by", "sort_dir"}

DEFAULT_ENDPOINTS: tuple[EndpointDescriptor, ...] = (
    # public content
    EndpointDescriptor("home.index", "/home"),
    EndpointDescriptor("home.calendar", "/home/calendar", frozenset({"month", "year"})),
    EndpointDescriptor("front.settings", "/front/settings", tenant_placement=TenantPlacement.NONE),
    EndpointDescriptor("school_classes.public_list", "/school-classes"),
    EndpointDescriptor("school_classes.public_show", "/school-classes/{id}"),
    EndpointDescriptor("filter.index", "/filter", frozenset({"class_id", "subject_id", "semester_id", "file_category"})),
    EndpointDescriptor("filter.subjects_by_class", "/filter/subjects/{class_id}"),
    EndpointDescriptor("filter.semesters_by_subject", "/filter/semesters/{subject_id}"),
    EndpointDescriptor("articles.show_public", "/articles/{id}"),
    EndpointDescriptor("articles.by_keyword", "/articles/by-keyword/{keyword}", PAGINATION_PARAMS),
    EndpointDescriptor("articles.by_class", "/articles/by-class/{grade_level}", PAGINATION_PARAMS),
    EndpointDescriptor("files.info", "/files/{id}/info"),
    EndpointDescriptor("keywords.index", "/keywords", PAGINATION_PARAMS),
    EndpointDescriptor("keywords.show", "/keywords/{keyword}", PAGINATION_PARAMS),
    EndpointDescriptor(
        "posts.list",
        "/posts",
        _LISTING | {"category_id", "is_featured"},
        tenant_placement=TenantPlacement.QUERY_CODE,
    ),
    EndpointDescriptor("posts.show", "/posts/{id}"),
    EndpointDescriptor("categories.list", "/categories", _LISTING),
    EndpointDescriptor("categories.show", "/categories/{id}"),
    EndpointDescriptor(
        "comments.list_public",
        "/comments/{database}",
        PAGINATION_PARAMS | {"commentable_id", "commentable_type"},
        tenant_placement=TenantPlacement.PATH,
    ),
    # dashboard
    EndpointDescriptor("dashboard.index", "/dashboard", tenant_placement=TenantPlacement.HEADER),
    EndpointDescriptor("articles.stats", "/dashboard/articles/stats"),
    EndpointDescriptor(
        "articles.list",
        "/dashboard/articles",
        _LISTING | {"subject_id", "semester_id", "status"},
    ),
    EndpointDescriptor("articles.show", "/dashboard/articles/{id}"),
    EndpointDescriptor("articles.edit", "/dashboard/articles/{id}/edit"),
    EndpointDescriptor("subjects.list", "/dashboard/subjects", _LISTING),
    EndpointDescriptor("semesters.list", "/dashboard/semesters", _LISTING),
    EndpointDescriptor(
        "comments.list_dashboard",
        "/dashboard/comments/{database}",
        PAGINATION_PARAMS | {"q", "type", "commentable_id", "commentable_type"},
        tenant_placement=TenantPlacement.PATH,
    ),
    EndpointDescriptor("roles.list", "/dashboard/roles", _LISTING, tenant_placement=TenantPlacement.NONE),
    EndpointDescriptor("roles.show", "/dashboard/roles/{id}", tenant_placement=TenantPlacement.NONE),
    EndpointDescriptor("permissions.list", "/dashboard/permissions", _LISTING, tenant_placement=TenantPlacement.NONE),
    EndpointDescriptor(
        "categories.store",
        "/dashboard/categories",
        method="POST",
    ),
)


@lru_cache
def get_endpoint_table() -> EndpointTable:
    return EndpointTable(DEFAULT_ENDPOINTS)
