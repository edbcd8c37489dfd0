#!/usr/bin/env python3
"""Send one logical request through the movie gateway and print the mapped response."""

from __future__ import annotations

import argparse
import json
import sys

from movies_backend.config import GatewayConfig, GatewayConfigError
from movies_backend.gateway.service import MovieGateway


def _parse_param(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"Expected NAME=VALUE, got {raw!r}")
    return name.strip(), value


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gateway_request",
        description="Resolve, authenticate and dispatch a single gateway request against TMDb.",
    )
    parser.add_argument("path", help="Logical path, e.g. /movies/popular or /movies/550/credits.")
    parser.add_argument(
        "--param",
        action="append",
        default=[],
        type=_parse_param,
        help="Query parameter as NAME=VALUE. Repeatable.",
    )
    parser.add_argument("--method", default="GET", help="HTTP method to simulate (default: GET).")
    parser.add_argument("--compact", action="store_true", help="Print JSON without indentation.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])

    try:
        config = GatewayConfig.from_env()
    except GatewayConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    gateway = MovieGateway(config)
    try:
        result = gateway.handle(args.method, args.path, dict(args.param))
    finally:
        gateway.close()

    print(f"HTTP {result.status_code}", file=sys.stderr)
    print(json.dumps(result.content, indent=None if args.compact else 2, ensure_ascii=False))
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
