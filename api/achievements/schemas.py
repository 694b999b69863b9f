"""
Pydantic schemas for achievement endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class AchievementCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    game_id: int = Field(..., ge=1)


class AchievementUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    game_id: int | None = Field(default=None, ge=1)


class AchievementDto(BaseModel):
    id: int
    name: str
    description: str | None = None
    game_id: int
