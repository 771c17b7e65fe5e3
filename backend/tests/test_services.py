import asyncio

import httpx
import pytest

from origin_gateway.services import (
    ArticlesService,
    CategoriesService,
    CommentsService,
    PostsService,
    RolesService,
    gather_results,
)
from origin_gateway.transport.errors import EndpointConfigurationError, OriginConnectionError, OriginError


def _paginated(items: list[dict], *, total: int) -> dict:
    return {
        "data": {
            "data": items,
            "meta": {"current_page": 1, "last_page": 1, "per_page": 15, "total": total},
            "links": {"first": "?page=1", "last": "?page=1", "prev": None, "next": None},
        }
    }


def test_articles_public_show_unwraps_single_object(make_dispatcher, captured_requests) -> None:
    dispatcher = make_dispatcher(lambda request: httpx.Response(200, json={"status": True, "data": {"id": 8, "title": "الكسور"}}))
    service = ArticlesService(dispatcher)

    result = asyncio.run(service.get_public(8, tenant="jo"))

    assert result.success is True
    assert result.data == {"id": 8, "title": "الكسور"}
    assert result.is_paginated is False
    assert captured_requests[0].url.path == "/api/articles/8"
    assert captured_requests[0].url.params["country"] == "1"


def test_articles_list_returns_paginated_result(make_dispatcher, captured_requests) -> None:
    dispatcher = make_dispatcher(lambda request: httpx.Response(200, json=_paginated([{"id": 1}, {"id": 2}], total=2)))
    service = ArticlesService(dispatcher)

    result = asyncio.run(service.list(tenant="sa", page=1, status=True))

    assert result.data == [{"id": 1}, {"id": 2}]
    assert result.meta["total"] == 2
    assert result.links["next"] is None
    params = captured_requests[0].url.params
    assert params["status"] == "true"
    assert params["country"] == "2"
    assert "per_page" not in params


def test_articles_by_keyword_flat_paginator(make_dispatcher, captured_requests) -> None:
    body = {"data": [{"id": 4}], "current_page": 2, "last_page": 3, "total": 31}
    dispatcher = make_dispatcher(lambda request: httpx.Response(200, json=body))

    result = asyncio.run(ArticlesService(dispatcher).by_keyword("توجيهي", tenant="jo", page=2))

    assert result.data == [{"id": 4}]
    assert result.meta == {"current_page": 2, "last_page": 3, "per_page": 15, "total": 31}
    assert captured_requests[0].url.params["page"] == "2"


def test_posts_list_sends_filters(make_dispatcher, captured_requests) -> None:
    dispatcher = make_dispatcher(lambda request: httpx.Response(200, json={"data": []}))

    result = asyncio.run(PostsService(dispatcher).list(tenant="ps", search="منح", sort_by="created_at", sort_dir="desc"))

    assert result.data == []
    assert result.success is True
    params = captured_requests[0].url.params
    assert params["country"] == "ps"
    assert params["search"] == "منح"
    assert params["sort_dir"] == "desc"


def test_posts_get_not_found_envelope(make_dispatcher) -> None:
    dispatcher = make_dispatcher(lambda request: httpx.Response(404, json={"message": "Post not found"}))

    result = asyncio.run(PostsService(dispatcher).get(999, tenant="jo"))

    assert result.success is False
    assert result.error_message == "Post not found"
    assert result.has_errors is True


def test_categories_create_surfaces_validation_errors(make_dispatcher, captured_requests) -> None:
    body = {"message": "The given data was invalid.", "errors": {"name": ["الاسم مطلوب"]}}
    dispatcher = make_dispatcher(lambda request: httpx.Response(422, json=body))

    result = asyncio.run(CategoriesService(dispatcher).create({"name": ""}, tenant="eg"))

    assert result.success is False
    assert result.field_errors == {"name": ["الاسم مطلوب"]}
    assert captured_requests[0].method == "POST"
    assert captured_requests[0].url.params["country"] == "3"


def test_comments_dashboard_uses_tenant_database(make_dispatcher, captured_requests) -> None:
    dispatcher = make_dispatcher(lambda request: httpx.Response(200, json=_paginated([], total=0)))

    result = asyncio.run(CommentsService(dispatcher).list_dashboard(tenant="sa", q="spam", type="post"))

    assert result.data == []
    assert result.meta["total"] == 0
    assert captured_requests[0].url.path == "/api/dashboard/comments/sa"
    assert captured_requests[0].url.params["type"] == "post"


def test_roles_and_permissions_are_tenantless(make_dispatcher, captured_requests) -> None:
    dispatcher = make_dispatcher(lambda request: httpx.Response(200, json={"data": [{"id": 1, "name": "admin"}]}))
    service = RolesService(dispatcher)

    asyncio.run(service.list(per_page=50))
    asyncio.run(service.permissions())
    asyncio.run(service.get(1))

    assert [request.url.path for request in captured_requests] == [
        "/api/dashboard/roles",
        "/api/dashboard/permissions",
        "/api/dashboard/roles/1",
    ]
    assert all("country" not in request.url.params for request in captured_requests)


def test_gather_results_isolates_transport_failures(make_dispatcher) -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/stats"):
            raise httpx.ConnectError("refused", request=request)
        return httpx.Response(200, json={"data": [{"id": 1}]})

    dispatcher = make_dispatcher(_handler)
    articles = ArticlesService(dispatcher)
    posts = PostsService(dispatcher)

    async def _run():
        return await gather_results(
            stats=articles.stats(tenant="jo"),
            posts=posts.list(tenant="jo"),
        )

    results = asyncio.run(_run())

    assert isinstance(results["stats"], OriginConnectionError)
    assert isinstance(results["stats"], OriginError)
    assert results["posts"].data == [{"id": 1}]
    assert list(results) == ["stats", "posts"]


def test_gather_results_propagates_programmer_errors(make_dispatcher) -> None:
    dispatcher = make_dispatcher(lambda request: httpx.Response(200, json={"data": []}))
    service = ArticlesService(dispatcher)

    async def _run():
        return await gather_results(
            ok=service.list(),
            broken=service.fetch("articles.unknown"),
        )

    with pytest.raises(EndpointConfigurationError):
        asyncio.run(_run())
