from origin_gateway.transport.errors import (
    EndpointConfigurationError,
    OriginConnectionError,
    OriginDependencyError,
    OriginError,
    OriginResponseFormatError,
    OriginTimeoutError,
    OriginTransportError,
)

__all__ = [
    "EndpointConfigurationError",
    "OriginConnectionError",
    "OriginDependencyError",
    "OriginError",
    "OriginResponseFormatError",
    "OriginTimeoutError",
    "OriginTransportError",
]
