"""
Dependency injection for the gateway and its configuration.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from movies_backend.config import GatewayConfig
from movies_backend.gateway.service import MovieGateway

logger = logging.getLogger(__name__)


@lru_cache
def get_gateway_config() -> GatewayConfig:
    """
    Resolve the gateway configuration once per process.

    Raises GatewayConfigError when TMDb credentials or numeric settings are invalid.
    """
    config = GatewayConfig.from_env()
    logger.info(f"TMDb gateway configured for {config.api_root} (timeout {config.timeout_seconds}s)")
    return config


@lru_cache
def get_gateway() -> MovieGateway:
    """
    Returns the process-wide gateway.

    The gateway only holds immutable configuration and a pooled HTTP session, so it is
    shared by all requests.
    """
    return MovieGateway(get_gateway_config())


def close_gateway() -> None:
    if get_gateway.cache_info().currsize:
        get_gateway().close()
        get_gateway.cache_clear()


# Type alias for dependency injection
Gateway = Annotated[MovieGateway, Depends(get_gateway)]
