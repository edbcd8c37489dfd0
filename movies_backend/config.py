"""
Process-wide gateway configuration.

The configuration is resolved once at startup and handed to the gateway
explicitly; request handling never reads the environment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from movies_backend.utils.env import env_flag, env_str, load_env

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.themoviedb.org"
DEFAULT_API_VERSION = 3
DEFAULT_TIMEOUT_SECONDS = 10.0


class GatewayConfigError(RuntimeError):
    """Raised when the gateway configuration is missing or malformed."""

    pass


@dataclass(frozen=True)
class GatewayConfig:
    base_url: str = DEFAULT_BASE_URL
    api_version: int = DEFAULT_API_VERSION
    bearer_token: str = field(default="", repr=False)
    api_key: str = field(default="", repr=False)
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def api_root(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.api_version}"

    def missing_credentials(self) -> list[str]:
        missing: list[str] = []
        if not self.bearer_token:
            missing.append("TMDB_BEARER")
        if not self.api_key:
            missing.append("TMDB_API_KEY")
        return missing

    def validate(self, *, allow_missing_credentials: bool = False) -> GatewayConfig:
        """
        Fail fast on configuration that would break every upstream call.

        With `allow_missing_credentials=True` an absent secret is only logged and the
        empty credential is sent upstream, which the upstream will reject per request.
        """
        if not self.base_url.startswith(("http://", "https://")):
            raise GatewayConfigError(f"TMDB_BASE_URL must be an http(s) URL, got {self.base_url!r}.")
        if self.timeout_seconds <= 0:
            raise GatewayConfigError("TMDB_TIMEOUT_SECONDS must be greater than zero.")

        missing = self.missing_credentials()
        if missing:
            names = ", ".join(missing)
            if not allow_missing_credentials:
                raise GatewayConfigError(
                    f"Missing TMDb credentials: {names}.\n"
                    "Set them in the environment or .env, or set TMDB_ALLOW_MISSING_CREDENTIALS=1 "
                    "to start anyway."
                )
            logger.warning(f"Missing TMDb credentials ({names}); upstream calls will be unauthenticated.")
        return self

    @classmethod
    def from_env(cls) -> GatewayConfig:
        load_env()
        config = cls(
            base_url=env_str("TMDB_BASE_URL", DEFAULT_BASE_URL),
            api_version=_parse_number("TMDB_API_VERSION", int, DEFAULT_API_VERSION),
            bearer_token=env_str("TMDB_BEARER"),
            api_key=env_str("TMDB_API_KEY"),
            timeout_seconds=_parse_number("TMDB_TIMEOUT_SECONDS", float, DEFAULT_TIMEOUT_SECONDS),
        )
        return config.validate(allow_missing_credentials=env_flag("TMDB_ALLOW_MISSING_CREDENTIALS"))


def _parse_number(name: str, kind: type, default: int | float) -> int | float:
    raw = env_str(name)
    if not raw:
        return default
    try:
        return kind(raw)
    except ValueError as exc:
        raise GatewayConfigError(f"{name} must be a number, got {raw!r}.") from exc
