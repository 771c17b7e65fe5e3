from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from string import Formatter
from types import MappingProxyType
from urllib.parse import quote

from origin_gateway.transport.errors import EndpointConfigurationError


class TenantPlacement(StrEnum):
    QUERY_ID = "query_id"
    QUERY_CODE = "query_code"
    PATH = "path"
    HEADER = "header"
    NONE = "none"


TENANT_QUERY_PARAM = "country"
TENANT_PATH_PARAM = "database"

PAGINATION_PARAMS = frozenset({"page", "per_page"})


@dataclass(frozen=True)
class EndpointDescriptor:
    name: str
    template: str
    query_params: frozenset[str] = field(default_factory=frozenset)
    method: str = "GET"
    tenant_placement: TenantPlacement = TenantPlacement.QUERY_ID

    @property
    def placeholders(self) -> tuple[str, ...]:
        return _template_placeholders(self.template)


def _template_placeholders(template: str) -> tuple[str, ...]:
    names: list[str] = []
    for _literal, field_name, _spec, _conversion in Formatter().parse(template):
        if field_name is not None and field_name not in names:
            names.append(field_name)
    return tuple(names)


class EndpointTable:
    def __init__(self, descriptors: Iterable[EndpointDescriptor]) -> None:
        table: dict[str, EndpointDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in table:
                raise EndpointConfigurationError(f"Duplicate endpoint name: {descriptor.name}")
            if descriptor.tenant_placement == TenantPlacement.PATH and TENANT_PATH_PARAM not in descriptor.placeholders:
                raise EndpointConfigurationError(
                    f"Endpoint {descriptor.name} places the tenant in the path but has no {{{TENANT_PATH_PARAM}}} placeholder."
                )
            table[descriptor.name] = descriptor
        self._table: Mapping[str, EndpointDescriptor] = MappingProxyType(table)

    def get(self, name: str) -> EndpointDescriptor:
        descriptor = self._table.get(name)
        if descriptor is None:
            raise EndpointConfigurationError(f"Unknown endpoint: {name}")
        return descriptor

    def names(self) -> tuple[str, ...]:
        return tuple(self._table)

    def placeholders(self, name: str) -> tuple[str, ...]:
        return self.get(name).placeholders

    def build(self, name: str, params: Mapping[str, str | int] | None = None) -> str:
        descriptor = self.get(name)
        values = params or {}
        missing = [key for key in descriptor.placeholders if values.get(key) is None or str(values[key]).strip() == ""]
        if missing:
            raise EndpointConfigurationError(
                f"Endpoint {name} is missing required path parameters: {', '.join(missing)}"
            )
        substitutions = {key: quote(str(values[key]).strip(), safe="") for key in descriptor.placeholders}
        return descriptor.template.format(**substitutions)

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __len__(self) -> int:
        return len(self._table)
