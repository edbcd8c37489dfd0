"""
External system integrations (TMDb).

Upstream metadata clients live under this namespace so they remain
decoupled from app entrypoints (`api/`) and developer scripts (`scripts/`).
"""
