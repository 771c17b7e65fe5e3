import os
os.environ["APP_ENV"] = "test"

# THEN import anything else
from collections.abc import Callable
from typing import Generator

import httpx
import pytest

from origin_gateway.core.settings import Settings, get_settings
from origin_gateway.endpoints.catalog import get_endpoint_table
from origin_gateway.tenancy.registry import get_tenant_registry
from origin_gateway.transport.dispatcher import RequestDispatcher


ORIGIN_BASE_URL = "http://origin.test/api"


def _clear_cached_config() -> None:
    get_settings.cache_clear()
    get_tenant_registry.cache_clear()
    get_endpoint_table.cache_clear()


@pytest.fixture(autouse=True)
def reset_cached_config() -> Generator[None, None, None]:
    _clear_cached_config()
    yield
    _clear_cached_config()


@pytest.fixture()
def origin_settings() -> Settings:
    return Settings(app_env="test", origin_api_base_url=ORIGIN_BASE_URL, origin_frontend_api_key="front-key")


@pytest.fixture()
def captured_requests() -> list[httpx.Request]:
    return []


@pytest.fixture()
def make_dispatcher(
    origin_settings: Settings,
    captured_requests: list[httpx.Request],
) -> Callable[[Callable[[httpx.Request], httpx.Response]], RequestDispatcher]:
    def _factory(handler: Callable[[httpx.Request], httpx.Response]) -> RequestDispatcher:
        def _recording_handler(request: httpx.Request) -> httpx.Response:
            captured_requests.append(request)
            return handler(request)

        return RequestDispatcher(settings=origin_settings, transport=httpx.MockTransport(_recording_handler))

    return _factory
