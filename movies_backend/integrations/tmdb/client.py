from __future__ import annotations

import json
import logging
import math
from typing import Any, Mapping

import requests

from movies_backend.config import GatewayConfig
from movies_backend.gateway.outcomes import Success, Upstream

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "accept": "application/json",
    "Content-Type": "application/json;charset=utf-8",
}


class TmdbClientError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None, body_snippet: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body_snippet = body_snippet


def build_url(config: GatewayConfig, upstream_path: str) -> str:
    if not upstream_path.startswith("/"):
        upstream_path = f"/{upstream_path}"
    return f"{config.api_root}{upstream_path}"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name!r}")


def _finite_float(raw: str) -> float:
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"JSON number out of range: {raw}")
    return value


def decode_success_body(resp: requests.Response) -> Any:
    """
    Decode a 2xx TMDb body.

    An empty body becomes `{}`; anything else must be strict JSON (no NaN or Infinity,
    which cannot be written back to the caller), but its shape is not checked.
    """

    text = resp.text or ""
    if not text:
        return {}
    try:
        return json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError as exc:
        raise TmdbClientError(
            "TMDb returned non-JSON response.",
            status_code=resp.status_code,
            body_snippet=text[:400],
        ) from exc


class TmdbClient:
    """
    Single-shot HTTP client for the TMDb v3 API.

    Each `fetch` performs exactly one request: there are no retries, and a non-2xx status
    is returned as an `Upstream` outcome carrying the status and raw body.
    Transport failures and undecodable bodies raise `TmdbClientError`.
    """

    def __init__(self, config: GatewayConfig, *, session: requests.Session | None = None) -> None:
        self.config = config
        self.session = session or requests.Session()

    def fetch(
        self,
        upstream_path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Success | Upstream:
        url = build_url(self.config, upstream_path)
        request_headers = {**DEFAULT_HEADERS, **(headers or {})}

        try:
            resp = self.session.get(
                url,
                params=dict(params or {}),
                headers=request_headers,
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise TmdbClientError(f"TMDb request failed: {exc}") from exc

        if not 200 <= resp.status_code < 300:
            body = resp.text or ""
            logger.warning(f"TMDb {upstream_path} failed with HTTP {resp.status_code}: {body[:200]}")
            return Upstream(status=resp.status_code, raw_body=body)

        return Success(body=decode_success_body(resp))

    def close(self) -> None:
        self.session.close()
