"""
Game API endpoints.

`/games/name/{name}/...` lookups are open to players; everything else is admin-only.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path

from auth import policy

from . import schemas, service

router = APIRouter()


@router.get("/games")
async def list_games(_: dict = Depends(policy.guard("games", "list"))) -> dict:
    return await service.list_games()


@router.post("/games")
async def create_game(
    request: schemas.GameCreate,
    _: dict = Depends(policy.guard("games", "create")),
) -> dict:
    return await service.create_game(request)


@router.get("/games/name/{name:path}/achievements")
async def get_game_achievements_by_name(
    name: str = Path(..., min_length=1),
    _: dict = Depends(policy.guard("games", "achievements_by_name")),
) -> dict:
    return await service.game_achievements_by_name(name)


@router.get("/games/name/{name:path}/items")
async def get_game_items_by_name(
    name: str = Path(..., min_length=1),
    _: dict = Depends(policy.guard("games", "items_by_name")),
) -> dict:
    return await service.game_items_by_name(name)


@router.get("/games/{game_id}")
async def get_game(
    game_id: int,
    _: dict = Depends(policy.guard("games", "get")),
) -> dict:
    return await service.get_game(game_id)


@router.get("/games/{game_id}/achievements")
async def get_game_achievements(
    game_id: int,
    _: dict = Depends(policy.guard("games", "achievements")),
) -> dict:
    return await service.game_achievements(game_id)


@router.get("/games/{game_id}/items")
async def get_game_items(
    game_id: int,
    _: dict = Depends(policy.guard("games", "items")),
) -> dict:
    return await service.game_items(game_id)


@router.put("/games/{game_id}")
async def update_game(
    game_id: int,
    request: schemas.GameUpdate,
    _: dict = Depends(policy.guard("games", "update")),
) -> dict:
    return await service.update_game(game_id, request)


@router.delete("/games/{game_id}")
async def delete_game(
    game_id: int,
    _: dict = Depends(policy.guard("games", "delete")),
) -> dict:
    return await service.delete_game(game_id)
