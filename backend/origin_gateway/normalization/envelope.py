"""Structural readers for origin response envelopes.

The origin API answers with one of several shapes and never declares which:

- raw payloads (bare list, bare object, primitive or null)
- ``{"data": T, "message"?, "status"?, "success"?}``
- ``{"data": {"data": T, "meta"?, "links"?}}`` for resource collections
- flat paginator fields (``current_page``, ``last_page``...) next to the payload
- error bodies (``message``, ``error``, ``errors``) mixed into any of the above

Every reader here is pure and total. Malformed input degrades to ``None``,
``[]``, ``{}``, ``False`` or the value itself; nothing raises.
"""

from __future__ import annotations

from typing import Any, TypedDict


DEFAULT_PER_PAGE = 15


PaginationMeta = TypedDict(
    "PaginationMeta",
    {
        "current_page": int,
        "last_page": int,
        "per_page": int,
        "total": int,
        "from": int,
        "to": int,
        "path": str,
    },
    total=False,
)


class LinkSet(TypedDict, total=False):
    first: str | None
    last: str | None
    prev: str | None
    next: str | None


def _is_truthy(value: Any) -> bool:
    # JSON truthiness: empty objects and arrays still signal presence.
    if isinstance(value, dict | list):
        return True
    return bool(value)


def unwrap_response(raw: Any) -> Any:
    if not isinstance(raw, dict):
        return raw
    inner = raw.get("data")
    # Collections are wrapped twice; this check must run before the single-wrap one.
    if isinstance(inner, dict) and "data" in inner:
        return inner["data"]
    if "data" in raw:
        return inner
    return raw


def unwrap_array_response(raw: Any) -> list[Any]:
    data = unwrap_response(raw)
    return data if isinstance(data, list) else []


def extract_meta(raw: Any) -> PaginationMeta | None:
    if not isinstance(raw, dict):
        return None

    meta = raw.get("meta")
    if isinstance(meta, dict):
        return meta

    inner = raw.get("data")
    if isinstance(inner, dict) and isinstance(inner.get("meta"), dict):
        return inner["meta"]

    if "current_page" in raw and "last_page" in raw:
        synthesized: PaginationMeta = {
            "current_page": raw["current_page"],
            "last_page": raw["last_page"],
            "per_page": raw.get("per_page") or DEFAULT_PER_PAGE,
            "total": raw.get("total") or 0,
        }
        for optional in ("from", "to", "path"):
            if raw.get(optional) is not None:
                synthesized[optional] = raw[optional]  # type: ignore[literal-required]
        return synthesized

    return None


def extract_links(raw: Any) -> LinkSet | None:
    if not isinstance(raw, dict):
        return None
    links = raw.get("links")
    if isinstance(links, dict):
        return links
    inner = raw.get("data")
    if isinstance(inner, dict) and isinstance(inner.get("links"), dict):
        return inner["links"]
    return None


def is_success_response(raw: Any) -> bool:
    """Infer success from an envelope.

    Explicit ``status``/``success`` booleans win. Otherwise error keys mean
    failure and a ``data`` key without an ``error`` means success.
    """
    if not isinstance(raw, dict):
        return False
    if raw.get("status") is True or raw.get("success") is True:
        return True
    if (
        _is_truthy(raw.get("error"))
        or _is_truthy(raw.get("errors"))
        or raw.get("status") is False
        or raw.get("success") is False
    ):
        return False
    return "data" in raw and not _is_truthy(raw.get("error"))


def extract_error_message(raw: Any) -> str | None:
    if not isinstance(raw, dict):
        return None
    message = raw.get("message")
    if isinstance(message, str):
        return message
    error = raw.get("error")
    if isinstance(error, str):
        return error
    errors = raw.get("errors")
    if isinstance(errors, dict):
        for messages in errors.values():
            if isinstance(messages, list) and messages and isinstance(messages[0], str) and messages[0]:
                return messages[0]
    return None


def extract_validation_errors(raw: Any) -> dict[str, Any]:
    if not isinstance(raw, dict):
        return {}
    errors = raw.get("errors")
    if isinstance(errors, dict):
        return errors
    return {}


def is_paginated_response(raw: Any) -> bool:
    if not isinstance(raw, dict):
        return False
    return isinstance(raw.get("data"), list) and isinstance(raw.get("meta"), dict)


def create_api_response(
    data: Any,
    *,
    success: bool = True,
    message: str | None = None,
    meta: dict[str, Any] | None = None,
) -> dict[str, Any]:
    envelope: dict[str, Any] = {"data": data, "status": success, "success": success}
    if message is not None:
        envelope["message"] = message
    if meta is not None:
        envelope["meta"] = meta
    return envelope
