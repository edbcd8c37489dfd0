"""
Credential attachment for outbound TMDb calls.

The mode comes from the endpoint definition alone. The four static category
listings keep the legacy `api_key` query parameter; every other endpoint sends
the bearer read-access token.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from movies_backend.config import GatewayConfig
from movies_backend.gateway.endpoints import AuthMode
from movies_backend.gateway.params import RequestContext

API_KEY_PARAM = "api_key"


@dataclass(frozen=True)
class OutboundRequest:
    upstream_path: str
    params: Mapping[str, Any]
    headers: Mapping[str, str]
    auth_mode: AuthMode


def authenticate(context: RequestContext, config: GatewayConfig) -> OutboundRequest:
    auth_mode = context.definition.auth_mode
    params = dict(context.query_params)
    headers: dict[str, str] = {}

    if auth_mode is AuthMode.LEGACY_API_KEY:
        params[API_KEY_PARAM] = config.api_key
    elif auth_mode is AuthMode.BEARER:
        headers["Authorization"] = f"Bearer {config.bearer_token}"
    else:
        raise ValueError(f"Unsupported auth mode: {auth_mode!r}")

    return OutboundRequest(
        upstream_path=context.upstream_path,
        params=MappingProxyType(params),
        headers=MappingProxyType(headers),
        auth_mode=auth_mode,
    )
