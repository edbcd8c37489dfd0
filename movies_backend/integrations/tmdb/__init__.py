"""
TMDb integration client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from movies_backend.integrations.tmdb.client import (
        TmdbClient,
        TmdbClientError,
        build_url,
        decode_success_body,
    )

__all__ = [
    "TmdbClient",
    "TmdbClientError",
    "build_url",
    "decode_success_body",
]


def __getattr__(name: str):
    if name in __all__:
        from movies_backend.integrations.tmdb import client

        return getattr(client, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
