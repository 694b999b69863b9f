"""
Achievement API endpoints (admin-only).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from auth import policy

from . import schemas, service

router = APIRouter()


@router.get("/achievements")
async def list_achievements(_: dict = Depends(policy.guard("achievements", "list"))) -> dict:
    return await service.list_achievements()


@router.post("/achievements")
async def create_achievement(
    request: schemas.AchievementCreate,
    _: dict = Depends(policy.guard("achievements", "create")),
) -> dict:
    return await service.create_achievement(request)


@router.get("/achievements/{achievement_id}")
async def get_achievement(
    achievement_id: int,
    _: dict = Depends(policy.guard("achievements", "get")),
) -> dict:
    return await service.get_achievement(achievement_id)


@router.put("/achievements/{achievement_id}")
async def update_achievement(
    achievement_id: int,
    request: schemas.AchievementUpdate,
    _: dict = Depends(policy.guard("achievements", "update")),
) -> dict:
    return await service.update_achievement(achievement_id, request)


@router.delete("/achievements/{achievement_id}")
async def delete_achievement(
    achievement_id: int,
    _: dict = Depends(policy.guard("achievements", "delete")),
) -> dict:
    return await service.delete_achievement(achievement_id)
