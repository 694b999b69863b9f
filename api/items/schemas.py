"""
Pydantic schemas for item endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ItemCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    attributes: dict[str, Any] = Field(default_factory=dict)
    game_id: int = Field(..., ge=1)


class ItemUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    # Replaces the whole attribute map when present.
    attributes: dict[str, Any] | None = None
    game_id: int | None = Field(default=None, ge=1)


class ItemDto(BaseModel):
    id: int
    name: str
    description: str | None = None
    attributes: dict[str, Any] = Field(default_factory=dict)
    game_id: int
