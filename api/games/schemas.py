"""
Pydantic schemas for game endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GameCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    genre: str | None = Field(default=None, max_length=100)
    description: str | None = Field(default=None, max_length=5000)


class GameUpdate(BaseModel):
    # Omitted (or null) fields keep their current value.
    title: str | None = Field(default=None, min_length=1, max_length=200)
    genre: str | None = Field(default=None, max_length=100)
    description: str | None = Field(default=None, max_length=5000)


class GameDto(BaseModel):
    id: int
    title: str
    genre: str | None = None
    description: str | None = None
