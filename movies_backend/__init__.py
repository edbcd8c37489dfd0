"""
Shared movies backend library code.

This package holds the data gateway that proxies the movie catalog front end
to the upstream TMDb service. It is reused by:
- the FastAPI app in `api/`
- developer scripts in `scripts/`

App entrypoints (FastAPI routers, CLI scripts) should live outside this package and
import from `movies_backend` rather than the other way around.
"""
