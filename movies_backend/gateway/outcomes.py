"""
Outcome values passed between gateway stages.

Every stage returns either its own output or one of the failure values below;
the response writer is the only place that turns them into HTTP.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class ErrorKind(str, Enum):
    CLIENT_INPUT = "ClientInput"
    METHOD_NOT_ALLOWED = "MethodNotAllowed"
    UPSTREAM = "Upstream"
    INTERNAL = "Internal"


@dataclass(frozen=True)
class Success:
    body: Any


@dataclass(frozen=True)
class ClientInput:
    message: str


@dataclass(frozen=True)
class MethodNotAllowed:
    method: str


@dataclass(frozen=True)
class Upstream:
    status: int
    raw_body: str


@dataclass(frozen=True)
class Internal:
    # Server-side detail for logs only.
    detail: str


Failure = Union[ClientInput, MethodNotAllowed, Upstream, Internal]
Outcome = Union[Success, Failure]

FAILURE_TYPES = (ClientInput, MethodNotAllowed, Upstream, Internal)


def is_failure(value: object) -> bool:
    return isinstance(value, FAILURE_TYPES)


@dataclass(frozen=True)
class GatewayError:
    """The client-visible failure shape."""

    kind: ErrorKind
    http_status: int
    message: str

    def to_payload(self) -> dict[str, str]:
        return {"error": self.message}
