"""
Self-describing index of the gateway endpoints.
"""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from movies_backend.gateway.catalog import build_catalog


router = APIRouter(tags=["catalog"])


# --- Pydantic models ---

class CatalogInfo(BaseModel):
    title: str
    version: str
    description: str


class CatalogParam(BaseModel):
    name: str
    location: str = Field(alias="in")
    type: str
    required: bool
    description: str
    default: Any = None
    enum: list[str] | None = None


class CatalogEndpoint(BaseModel):
    method: str
    path: str
    summary: str
    auth: str
    params: list[CatalogParam]
    example: str | None = None


class Catalog(BaseModel):
    info: CatalogInfo
    baseUrl: str
    endpoints: list[CatalogEndpoint]


# --- Endpoints ---

@router.get("", response_model=Catalog)
def get_catalog() -> dict:
    """List the gateway endpoints, their parameters and example URLs."""
    return build_catalog(base_url="/api")
