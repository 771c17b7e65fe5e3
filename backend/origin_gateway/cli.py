from __future__ import annotations

import argparse
import asyncio
from dataclasses import asdict
import json
import sys
from typing import Any

from origin_gateway.core.logging_config import configure_logging
from origin_gateway.core.settings import get_settings
from origin_gateway.normalization.result import NormalizedResult, normalize, normalize_list
from origin_gateway.transport.dispatcher import RequestDispatcher
from origin_gateway.transport.errors import EndpointConfigurationError, OriginTransportError
from origin_gateway.transport.types import CacheHints


EXIT_OK = 0
EXIT_ENVELOPE_FAILURE = 1
EXIT_TRANSPORT_FAILURE = 3


def parse_pairs(values: list[str] | None, *, flag: str) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for item in values or []:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"{flag} expects key=value, got {item!r}")
        pairs[key.strip()] = value
    return pairs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dispatch one origin request and print the normalized result.")
    parser.add_argument("operation", help="Logical endpoint name, e.g. posts.list")
    parser.add_argument("--tenant", default=None, help="Tenant code, e.g. jo. Unknown codes fall back to the default tenant.")
    parser.add_argument("--param", action="append", help="Path parameter as key=value; repeatable.")
    parser.add_argument("--query", action="append", help="Query parameter as key=value; repeatable.")
    parser.add_argument("--list", action="store_true", help="Normalize the payload as a list.")
    parser.add_argument("--no-store", action="store_true", help="Ask intermediaries not to serve a cached copy.")
    return parser


async def run_probe(
    dispatcher: RequestDispatcher,
    operation: str,
    *,
    tenant: str | None,
    path_params: dict[str, str],
    query: dict[str, str],
    as_list: bool = False,
    no_store: bool = False,
) -> NormalizedResult[Any]:
    raw = await dispatcher.dispatch(
        operation,
        tenant=tenant,
        path_params=path_params,
        query=query,
        cache_hints=CacheHints(no_store=True) if no_store else None,
    )
    return normalize_list(raw) if as_list else normalize(raw)


def main(argv: list[str] | None = None, *, dispatcher: RequestDispatcher | None = None) -> int:
    settings = get_settings()
    configure_logging(log_level=settings.log_level, app_env=settings.app_env)
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        path_params = parse_pairs(args.param, flag="--param")
        query = parse_pairs(args.query, flag="--query")
    except ValueError as exc:
        parser.error(str(exc))

    probe = run_probe(
        dispatcher or RequestDispatcher(settings=settings),
        args.operation,
        tenant=args.tenant,
        path_params=path_params,
        query=query,
        as_list=args.list,
        no_store=args.no_store,
    )
    try:
        result = asyncio.run(probe)
    except EndpointConfigurationError as exc:
        parser.error(str(exc))
    except OriginTransportError as exc:
        print(json.dumps({"error_code": exc.error_code, "status_code": exc.status_code, "message": str(exc)}), file=sys.stderr)
        return EXIT_TRANSPORT_FAILURE
    print(json.dumps(asdict(result), ensure_ascii=False, indent=2, default=str))
    return EXIT_OK if result.success else EXIT_ENVELOPE_FAILURE
