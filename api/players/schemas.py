"""
Pydantic schemas for player/admin endpoints.

Players and admins share one shape; only their role and table differ.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

# Doubles as the credential username; surrounding blanks are dropped.
Nickname = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class MemberCreate(BaseModel):
    nickname: Nickname
    email: str | None = Field(default=None, max_length=320)
    level: int = Field(default=1, ge=0)
    experience: int = Field(default=0, ge=0)


class MemberUpdate(BaseModel):
    # Omitted (or null) fields keep their current value.
    nickname: Nickname | None = None
    email: str | None = Field(default=None, max_length=320)
    level: int | None = Field(default=None, ge=0)
    experience: int | None = Field(default=None, ge=0)


class PlayerRegister(BaseModel):
    nickname: Nickname
    email: str | None = Field(default=None, max_length=320)
    password: str = Field(..., min_length=8, max_length=128)


class PlayerDto(BaseModel):
    id: int
    nickname: str
    email: str | None = None
    level: int
    experience: int


class AdminDto(BaseModel):
    id: int
    nickname: str
    email: str | None = None
    level: int
    experience: int
