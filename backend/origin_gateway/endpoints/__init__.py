from origin_gateway.endpoints.catalog import DEFAULT_ENDPOINTS, get_endpoint_table
from origin_gateway.endpoints.table import EndpointDescriptor, EndpointTable, TenantPlacement

__all__ = [
    "DEFAULT_ENDPOINTS",
    "EndpointDescriptor",
    "EndpointTable",
    "TenantPlacement",
    "get_endpoint_table",
]
