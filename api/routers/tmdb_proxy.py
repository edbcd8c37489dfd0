"""
Proxy endpoints for the movie catalog.

A single route accepts every method on every path below the router prefix and hands
the request to the gateway, which owns resolution, validation and error mapping.
Adding an endpoint means adding a definition to `movies_backend.gateway.endpoints`.
"""
from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.deps import Gateway


router = APIRouter(tags=["movies"])

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


class ErrorResponse(BaseModel):
    error: str


@router.api_route(
    "/{logical_path:path}",
    methods=PROXY_METHODS,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid parameter, or unknown endpoint"},
        405: {"model": ErrorResponse, "description": "Method other than GET"},
        500: {"model": ErrorResponse, "description": "Unexpected failure"},
    },
)
def proxy(gateway: Gateway, logical_path: str, request: Request) -> JSONResponse:
    """Forward a logical movie-catalog request to TMDb."""
    result = gateway.handle(request.method, f"/{logical_path}", request.query_params)
    return JSONResponse(status_code=result.status_code, content=result.content)
