"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from . import policy, schemas, service

router = APIRouter()


@router.post("/auth/login", response_model=schemas.TokenResponse)
async def login(
    request: schemas.LoginRequest,
    _: None = Depends(policy.guard("auth", "login")),
) -> schemas.TokenResponse:
    return await service.login(request)


@router.get("/auth/me", response_model=schemas.UserResponse)
async def me(current_user: dict = Depends(policy.guard("auth", "me"))) -> schemas.UserResponse:
    return service.me(current_user)
