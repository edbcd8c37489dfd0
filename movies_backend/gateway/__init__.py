"""
Data gateway between the movies front end and TMDb.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from movies_backend.gateway.responses import GatewayResponse
    from movies_backend.gateway.service import MovieGateway

__all__ = [
    "GatewayResponse",
    "MovieGateway",
]

_MODULES = {
    "GatewayResponse": "responses",
    "MovieGateway": "service",
}


def __getattr__(name: str):
    if name in _MODULES:
        from importlib import import_module

        module = import_module(f"movies_backend.gateway.{_MODULES[name]}")
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
