from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping
from urllib.parse import quote

from movies_backend.gateway.endpoints import EndpointDefinition, ParamLocation, ParamSpec, Resolution
from movies_backend.gateway.outcomes import ClientInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """Validated, per-request view of a resolved endpoint."""

    definition: EndpointDefinition
    path_params: Mapping[str, str]
    query_params: Mapping[str, Any]

    @property
    def upstream_path(self) -> str:
        encoded = {name: quote(value, safe="") for name, value in self.path_params.items()}
        return self.definition.upstream_path.format(**encoded)


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _coerce(spec: ParamSpec, raw: Any) -> Any | ClientInput:
    if spec.kind is not int:
        return raw
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        if not (text.isascii() and text.isdigit()):
            return ClientInput(message=f'Invalid "{spec.name}" parameter: expected a positive integer')
        value = int(text)
    if value < 1:
        return ClientInput(message=f'Invalid "{spec.name}" parameter: expected a positive integer')
    return value


def normalize(resolution: Resolution, query: Mapping[str, Any] | None = None) -> RequestContext | ClientInput:
    """
    Build the canonical parameter set for a resolved endpoint.

    Only parameters the definition declares are copied; empty values are dropped and
    integer parameters fall back to their default when absent.
    """

    definition = resolution.definition
    query = query or {}

    path_params: dict[str, str] = {}
    query_params: dict[str, Any] = {}

    for spec in definition.required:
        raw = resolution.path_params.get(spec.name) if spec.location is ParamLocation.PATH else query.get(spec.name)
        if _is_blank(raw):
            return ClientInput(message=spec.missing_message or f'Missing required "{spec.name}" parameter')
        value = _coerce(spec, raw)
        if isinstance(value, ClientInput):
            return value
        if spec.location is ParamLocation.PATH:
            path_params[spec.name] = str(value)
        else:
            query_params[spec.name] = value

    for spec in definition.optional:
        raw = query.get(spec.name)
        if _is_blank(raw):
            if spec.default is not None:
                query_params[spec.name] = spec.default
            continue
        value = _coerce(spec, raw)
        if isinstance(value, ClientInput):
            return value
        query_params[spec.name] = value

    for name, value in definition.fixed_params:
        query_params[name] = value

    declared = {spec.name for spec in definition.params}
    dropped = sorted(name for name in query if name not in declared)
    if dropped:
        logger.debug(f"Dropping undeclared parameters for {definition.name}: {', '.join(dropped)}")

    return RequestContext(
        definition=definition,
        path_params=MappingProxyType(path_params),
        query_params=MappingProxyType(query_params),
    )
