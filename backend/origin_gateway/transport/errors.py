from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass(frozen=True)
class ErrorClassification:
    error_code: str
    reason_code: str
    retryable: bool
    severity: str


class EndpointConfigurationError(LookupError):
    """Unknown endpoint name, missing placeholder or forbidden query parameter.

    Raised for programmer errors only; the gateway never catches it.
    """


class OriginError(Exception):
    def __init__(
        self,
        message: str,
        *,
        error_code: str,
        reason_code: str,
        retryable: bool,
        severity: str,
        status_code: int | None = None,
        upstream_payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.reason_code = reason_code
        self.retryable = retryable
        self.severity = severity
        self.status_code = status_code
        self.upstream_payload = upstream_payload


class OriginTransportError(OriginError):
    """The request produced no usable JSON body."""


class OriginTimeoutError(OriginTransportError):
    def __init__(self, message: str = "Origin request timed out.", *, status_code: int | None = None) -> None:
        super().__init__(
            message,
            error_code="origin_timeout",
            reason_code="timeout",
            retryable=True,
            severity="error",
            status_code=status_code,
        )


class OriginConnectionError(OriginTransportError):
    def __init__(self, message: str = "Origin connection failed.", *, status_code: int | None = None) -> None:
        super().__init__(
            message,
            error_code="origin_connection",
            reason_code="connection_error",
            retryable=True,
            severity="error",
            status_code=status_code,
        )


class OriginDependencyError(OriginTransportError):
    def __init__(self, message: str = "Origin dependency unavailable.", *, status_code: int | None = None) -> None:
        super().__init__(
            message,
            error_code="origin_dependency_unavailable",
            reason_code="dependency_unavailable",
            retryable=True,
            severity="error",
            status_code=status_code,
        )


class OriginResponseFormatError(OriginTransportError):
    def __init__(
        self,
        message: str = "Origin response body is not valid JSON.",
        *,
        status_code: int | None = None,
        upstream_payload: Any = None,
    ) -> None:
        super().__init__(
            message,
            error_code="origin_response_invalid",
            reason_code="response_invalid",
            retryable=status_code is not None and status_code >= 500,
            severity="error",
            status_code=status_code,
            upstream_payload=upstream_payload,
        )


def classification_from_exception(exc: Exception) -> ErrorClassification:
    if isinstance(exc, OriginError):
        return ErrorClassification(
            error_code=exc.error_code,
            reason_code=exc.reason_code,
            retryable=exc.retryable,
            severity=exc.severity,
        )
    if isinstance(exc, TimeoutError | httpx.TimeoutException):
        return ErrorClassification("origin_timeout", "timeout", True, "error")
    if isinstance(exc, ConnectionError | httpx.ConnectError):
        return ErrorClassification("origin_connection", "connection_error", True, "error")
    if isinstance(exc, httpx.DecodingError | ValueError):
        return ErrorClassification("origin_response_invalid", "response_invalid", False, "error")
    if isinstance(exc, httpx.HTTPError):
        return ErrorClassification("origin_dependency_unavailable", "dependency_unavailable", True, "error")
    return ErrorClassification("origin_internal_error", "internal_error", False, "critical")


def classify_transport_error(exc: Exception) -> OriginTransportError:
    if isinstance(exc, OriginTransportError):
        return exc
    classification = classification_from_exception(exc)
    if classification.reason_code == "timeout":
        return OriginTimeoutError(str(exc) or "Origin request timed out.")
    if classification.reason_code == "connection_error":
        return OriginConnectionError(str(exc) or "Origin connection failed.")
    if classification.reason_code == "response_invalid":
        return OriginResponseFormatError(str(exc) or "Origin response body is not valid JSON.")
    if classification.reason_code == "dependency_unavailable":
        return OriginDependencyError(str(exc) or "Origin dependency unavailable.")
    return OriginTransportError(
        str(exc) or classification.reason_code,
        error_code=classification.error_code,
        reason_code=classification.reason_code,
        retryable=classification.retryable,
        severity=classification.severity,
    )
