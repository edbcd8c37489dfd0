"""
The movie data gateway.

Each request runs Resolve -> Normalize -> Authenticate -> Dispatch -> Map, and any
failure short-circuits straight to the response writer. The gateway keeps no
per-request state between calls.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import requests

from movies_backend.config import GatewayConfig
from movies_backend.gateway.auth import OutboundRequest, authenticate
from movies_backend.gateway.endpoints import resolve
from movies_backend.gateway.outcomes import Internal, Outcome, is_failure
from movies_backend.gateway.params import normalize
from movies_backend.gateway.responses import GatewayResponse, write_response
from movies_backend.integrations.tmdb.client import TmdbClient, TmdbClientError

logger = logging.getLogger(__name__)


class MovieGateway:
    def __init__(
        self,
        config: GatewayConfig,
        *,
        session: requests.Session | None = None,
        client: TmdbClient | None = None,
    ) -> None:
        self.config = config
        self.client = client or TmdbClient(config, session=session)

    def handle(self, method: str, path: str, query: Mapping[str, Any] | None = None) -> GatewayResponse:
        """
        Serve one logical request.

        This is the only error boundary: nothing raised below escapes it, and the caller
        always gets either the upstream body or an `{"error": ...}` envelope.
        """
        try:
            outcome = self._run(method, path, query or {})
        except Exception as exc:
            logger.exception(f"Unexpected gateway failure for {method} {path}")
            outcome = Internal(detail=str(exc))
        return write_response(outcome)

    def _run(self, method: str, path: str, query: Mapping[str, Any]) -> Outcome:
        resolution = resolve(method, path)
        if is_failure(resolution):
            return resolution

        context = normalize(resolution, query)
        if is_failure(context):
            return context

        return self._dispatch(authenticate(context, self.config))

    def _dispatch(self, outbound: OutboundRequest) -> Outcome:
        logger.debug(
            f"TMDb GET {outbound.upstream_path} auth={outbound.auth_mode.value} "
            f"params={sorted(k for k in outbound.params if k != 'api_key')}"
        )
        try:
            return self.client.fetch(
                outbound.upstream_path,
                params=outbound.params,
                headers=outbound.headers,
            )
        except TmdbClientError as exc:
            logger.error(f"TMDb call to {outbound.upstream_path} failed: {exc}")
            return Internal(detail=str(exc))

    def close(self) -> None:
        self.client.close()
