"""Schemas for directory metadata endpoints."""

from __future__ import annotations

from pydantic import BaseModel


class FocusArea(BaseModel):
    """One entry of the controlled focus-area taxonomy."""

    id: str
    name: str
    icon: str
    description: str


class FocusAreaTaxonomyResponse(BaseModel):
    focus_areas: list[FocusArea]
    total: int
