from __future__ import annotations

from typing import Any

from movies_backend.gateway.endpoints import ENDPOINTS, EndpointDefinition, ParamSpec

API_TITLE = "Movies App API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "REST API for the Movies application. Proxies requests to TMDb."


def _param_entry(spec: ParamSpec, *, required: bool) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "name": spec.name,
        "in": spec.location.value,
        "type": spec.type_name,
        "required": required,
        "description": spec.description,
    }
    if spec.default is not None:
        entry["default"] = spec.default
    if spec.choices is not None:
        entry["enum"] = sorted(spec.choices)
    return entry


def endpoint_entry(definition: EndpointDefinition, *, base_url: str = "/api") -> dict[str, Any]:
    return {
        "method": definition.method,
        "path": f"{base_url}{definition.pattern}",
        "summary": definition.summary,
        "auth": definition.auth_mode.value,
        "params": [_param_entry(spec, required=True) for spec in definition.required]
        + [_param_entry(spec, required=False) for spec in definition.optional],
        "example": f"{base_url}{definition.example}" if definition.example else None,
    }


def build_catalog(*, base_url: str = "/api") -> dict[str, Any]:
    """Describe every gateway endpoint, in registry order."""
    return {
        "info": {
            "title": API_TITLE,
            "version": API_VERSION,
            "description": API_DESCRIPTION,
        },
        "baseUrl": base_url,
        "endpoints": [endpoint_entry(definition, base_url=base_url) for definition in ENDPOINTS],
    }
