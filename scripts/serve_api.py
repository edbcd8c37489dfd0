#!/usr/bin/env python3
"""Run the Movies Backend API under uvicorn."""

from __future__ import annotations

import argparse
import sys

import uvicorn

from movies_backend.utils.env import env_str, load_env


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="serve_api",
        description="Serve the movies data gateway (FastAPI app `api.main:app`).",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1).")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to (default: 8000).")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development only).")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: LOG_LEVEL env var or INFO).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    load_env()

    log_level = (args.log_level or env_str("LOG_LEVEL", "INFO")).lower()
    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=log_level,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
