"""
Player/admin API endpoints.

`/admins/...` is the admin-only management resource. `/players/register` is
open; the rest of `/players/me/...` acts on the calling player.

Static `/admins/...` paths are declared before `/admins/{admin_id}`.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from auth import policy

from . import schemas, service

router = APIRouter()


@router.get("/admins/players")
async def get_all_players(_: dict = Depends(policy.guard("admins", "players"))) -> dict:
    return await service.list_players()


@router.get("/admins/list")
async def get_all_admins(_: dict = Depends(policy.guard("admins", "list"))) -> dict:
    return await service.list_admins()


@router.post("/admins/create-players")
async def create_player(
    request: schemas.MemberCreate,
    _: dict = Depends(policy.guard("admins", "create_player")),
) -> dict:
    return await service.create_player(request)


@router.post("/admins/create-admins")
async def create_admin(
    request: schemas.MemberCreate,
    _: dict = Depends(policy.guard("admins", "create")),
) -> dict:
    return await service.create_admin(request)


@router.get("/admins/players/{player_id}")
async def get_player(
    player_id: int,
    _: dict = Depends(policy.guard("admins", "player")),
) -> dict:
    return await service.get_player(player_id)


@router.get("/admins/players/{player_id}/games")
async def get_player_games(
    player_id: int,
    _: dict = Depends(policy.guard("admins", "player_games")),
) -> dict:
    return await service.player_games(player_id)


@router.get("/admins/players/{player_id}/items")
async def get_player_items(
    player_id: int,
    _: dict = Depends(policy.guard("admins", "player_items")),
) -> dict:
    return await service.player_items(player_id)


@router.get("/admins/players/{player_id}/achievements")
async def get_player_achievements(
    player_id: int,
    _: dict = Depends(policy.guard("admins", "player_achievements")),
) -> dict:
    return await service.player_achievements(player_id)


@router.put("/admins/players/{player_id}/update")
async def update_player(
    player_id: int,
    request: schemas.MemberUpdate,
    _: dict = Depends(policy.guard("admins", "update_player")),
) -> dict:
    return await service.update_player(player_id, request)


@router.delete("/admins/players/{player_id}/delete")
async def delete_player(
    player_id: int,
    _: dict = Depends(policy.guard("admins", "delete_player")),
) -> dict:
    return await service.delete_player(player_id)


@router.get("/admins/{admin_id}")
async def get_admin(
    admin_id: int,
    _: dict = Depends(policy.guard("admins", "get")),
) -> dict:
    return await service.get_admin(admin_id)


@router.put("/admins/{admin_id}/update")
async def update_admin(
    admin_id: int,
    request: schemas.MemberUpdate,
    _: dict = Depends(policy.guard("admins", "update")),
) -> dict:
    return await service.update_admin(admin_id, request)


@router.delete("/admins/{admin_id}/delete")
async def delete_admin(
    admin_id: int,
    _: dict = Depends(policy.guard("admins", "delete")),
) -> dict:
    return await service.delete_admin(admin_id)


@router.post("/players/register")
async def register_player(
    request: schemas.PlayerRegister,
    _: None = Depends(policy.guard("players", "register")),
) -> dict:
    return await service.register_player(request)


@router.get("/players/me")
async def get_me(current_user: dict = Depends(policy.guard("players", "me"))) -> dict:
    return await service.me(current_user)


@router.get("/players/me/games")
async def get_my_games(current_user: dict = Depends(policy.guard("players", "my_games"))) -> dict:
    return await service.my_games(current_user)


@router.get("/players/me/items")
async def get_my_items(current_user: dict = Depends(policy.guard("players", "my_items"))) -> dict:
    return await service.my_items(current_user)


@router.get("/players/me/achievements")
async def get_my_achievements(
    current_user: dict = Depends(policy.guard("players", "my_achievements")),
) -> dict:
    return await service.my_achievements(current_user)


@router.post("/players/me/games/{game_id}")
async def acquire_game(
    game_id: int,
    current_user: dict = Depends(policy.guard("players", "acquire_game")),
) -> dict:
    return await service.acquire_game(current_user, game_id)


@router.post("/players/me/items/{item_id}")
async def collect_item(
    item_id: int,
    current_user: dict = Depends(policy.guard("players", "collect_item")),
) -> dict:
    return await service.collect_item(current_user, item_id)


@router.post("/players/me/achievements/{achievement_id}")
async def unlock_achievement(
    achievement_id: int,
    current_user: dict = Depends(policy.guard("players", "unlock_achievement")),
) -> dict:
    return await service.unlock_achievement(current_user, achievement_id)
