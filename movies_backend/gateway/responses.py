from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from movies_backend.gateway.outcomes import (
    ClientInput,
    ErrorKind,
    Failure,
    GatewayError,
    Internal,
    MethodNotAllowed,
    Outcome,
    Success,
    Upstream,
)

METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"
INTERNAL_ERROR_MESSAGE = "Internal server error"


@dataclass(frozen=True)
class GatewayResponse:
    status_code: int
    content: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


def to_gateway_error(failure: Failure) -> GatewayError:
    if isinstance(failure, ClientInput):
        return GatewayError(ErrorKind.CLIENT_INPUT, 400, failure.message)
    if isinstance(failure, MethodNotAllowed):
        return GatewayError(ErrorKind.METHOD_NOT_ALLOWED, 405, METHOD_NOT_ALLOWED_MESSAGE)
    if isinstance(failure, Upstream):
        return GatewayError(
            ErrorKind.UPSTREAM,
            failure.status,
            f"TMDB API error {failure.status}: {failure.raw_body}",
        )
    if isinstance(failure, Internal):
        # Internal detail stays in the server log.
        return GatewayError(ErrorKind.INTERNAL, 500, INTERNAL_ERROR_MESSAGE)
    raise TypeError(f"Not a gateway failure: {failure!r}")


def write_response(outcome: Outcome) -> GatewayResponse:
    if isinstance(outcome, Success):
        return GatewayResponse(status_code=200, content=outcome.body)
    error = to_gateway_error(outcome)
    return GatewayResponse(status_code=error.http_status, content=error.to_payload())
