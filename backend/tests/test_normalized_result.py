import pytest

from origin_gateway.normalization.result import NormalizedResult, normalize, normalize_list


def test_normalize_double_wrapped_collection() -> None:
    items = [{"id": 1, "title": "الرياضيات"}, {"id": 2, "title": "العلوم"}]
    meta = {"current_page": 1, "last_page": 2, "per_page": 2, "total": 4, "path": "/api/posts"}
    links = {"first": "/api/posts?page=1", "last": "/api/posts?page=2", "prev": None, "next": "/api/posts?page=2"}

    result = normalize_list({"data": {"data": items, "meta": meta, "links": links}})

    assert result.data is items
    assert result.meta is meta
    assert result.links is links
    assert result.success is True
    assert result.error_message is None
    assert result.field_errors == {}
    assert result.is_paginated is True
    assert result.has_errors is False


def test_normalize_flat_paginated_listing() -> None:
    raw = {"data": [{"id": 7}], "current_page": 3, "last_page": 3, "total": 31, "from": 31, "to": 31}

    result = normalize_list(raw)

    assert result.data == [{"id": 7}]
    assert result.meta == {"current_page": 3, "last_page": 3, "per_page": 15, "total": 31, "from": 31, "to": 31}
    assert result.links is None
    assert result.success is True


def test_normalize_validation_error_envelope() -> None:
    errors = {"title": ["العنوان مطلوب"], "content": ["المحتوى قصير"]}
    result = normalize({"message": "The given data was invalid.", "errors": errors})

    assert result.success is False
    assert result.error_message == "The given data was invalid."
    assert result.field_errors is errors
    assert result.has_errors is True
    assert result.data == {"message": "The given data was invalid.", "errors": errors}


def test_normalize_single_wrapped_with_explicit_failure() -> None:
    result = normalize({"status": False, "message": "المقال غير موجود", "data": None})

    assert result.data is None
    assert result.success is False
    assert result.error_message == "المقال غير موجود"
    assert result.has_errors is True


def test_normalize_success_message_is_not_an_error() -> None:
    result = normalize({"status": True, "message": "تم الحفظ", "data": {"id": 4}})

    assert result.data == {"id": 4}
    assert result.success is True
    assert result.error_message == "تم الحفظ"
    assert result.has_errors is False


@pytest.mark.parametrize("raw", [None, "text", 42])
def test_normalize_primitive_bodies(raw) -> None:
    result = normalize(raw)
    assert result.data is raw
    assert result.meta is None
    assert result.links is None
    assert result.success is False
    assert result.error_message is None
    assert result.field_errors == {}


def test_normalize_list_coerces_non_list_payloads() -> None:
    assert normalize_list({"data": {"id": 1}}).data == []
    assert normalize_list(None).data == []


def test_normalize_raw_list_body() -> None:
    body = [{"id": 1}]
    result = normalize(body)
    assert result.data is body
    assert result.success is False


def test_normalized_results_are_independent_and_frozen() -> None:
    first = normalize({"data": {"id": 1}})
    second = normalize({"errors": {"x": ["bad"]}})

    assert first.field_errors == {}
    assert second.field_errors == {"x": ["bad"]}
    with pytest.raises(AttributeError):
        first.success = False  # type: ignore[misc]


def test_normalized_result_defaults() -> None:
    result: NormalizedResult[list[int]] = NormalizedResult(data=[])
    assert result.meta is None
    assert result.success is False
    assert result.field_errors == {}
