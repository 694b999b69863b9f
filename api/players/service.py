"""
Player/admin business logic.

Creating a player or admin also issues exactly one credential (username =
nickname). Admin-created members get the placeholder password from
`core.settings.default_member_password()`; self-registered players choose
their own. Deleting a member removes its credential first, then the member.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from achievements import repository as achievement_repository
from auth import repository as auth_repository
from auth import service as auth_service
from auth.schemas import Role
from core import errors, links, settings
from games import repository as game_repository
from games import service as game_service
from items import repository as item_repository

from . import mapper, repository, schemas

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemberKind:
    key: str
    name: str
    role: Role
    to_dto: Callable[[dict], schemas.PlayerDto | schemas.AdminDto]
    links_for: Callable[[int], list[dict[str, str]]]
    collection_links: Callable[[], list[dict[str, str]]]
    recovery_links: Callable[[], list[dict[str, str]]]


PLAYER = MemberKind(
    key="player",
    name="Player",
    role=Role.PLAYER,
    to_dto=mapper.to_player_dto,
    links_for=links.player_links,
    collection_links=lambda: [
        links.link("self", "admins", "players"),
        links.link("create", "admins", "create_player"),
    ],
    recovery_links=lambda: [
        links.link("all-players", "admins", "players"),
        links.link("create", "admins", "create_player"),
    ],
)

ADMIN = MemberKind(
    key="admin",
    name="Admin",
    role=Role.ADMIN,
    to_dto=mapper.to_admin_dto,
    links_for=links.admin_links,
    collection_links=lambda: [
        links.link("self", "admins", "list"),
        links.link("create", "admins", "create"),
    ],
    recovery_links=lambda: [
        links.link("all-admins", "admins", "list"),
        links.link("create", "admins", "create"),
    ],
)


def _to_resource(kind: MemberKind, row: dict) -> dict:
    dto = kind.to_dto(row)
    return links.resource(dto, kind.links_for(dto.id))


async def _require_member(kind: MemberKind, member_id: int) -> dict:
    row = await repository.get_member(kind.key, member_id)
    if row is None:
        raise errors.NotFoundError(kind.name, member_id)
    return row


async def _list_members(kind: MemberKind) -> dict:
    rows = await repository.list_members(kind.key)
    return links.collection([_to_resource(kind, row) for row in rows], kind.collection_links())


async def _insert_with_credentials(
    kind: MemberKind,
    *,
    nickname: str,
    email: str | None,
    level: int,
    experience: int,
    password: str,
) -> dict:
    row = await repository.insert_member(
        kind.key,
        nickname=nickname,
        email=email,
        level=level,
        experience=experience,
    )
    member_id = int(row["id"])
    try:
        await auth_service.issue_credentials(
            username=nickname,
            password=password,
            role=kind.role,
            player_id=member_id if kind is PLAYER else None,
            admin_id=member_id if kind is ADMIN else None,
        )
    except errors.ConflictError:
        # Username taken by the other kind: do not leave a member without credentials.
        await repository.delete_member(kind.key, member_id)
        raise
    logger.info("Created %s %s (%r).", kind.key, member_id, nickname)
    return row


async def _create_member(kind: MemberKind, payload: schemas.MemberCreate) -> dict:
    row = await _insert_with_credentials(
        kind,
        nickname=payload.nickname,
        email=payload.email,
        level=payload.level,
        experience=payload.experience,
        password=settings.default_member_password(),
    )
    return _to_resource(kind, row)


async def _update_member(kind: MemberKind, member_id: int, payload: schemas.MemberUpdate) -> dict:
    existing = await _require_member(kind, member_id)
    merged = {**existing, **payload.model_dump(exclude_none=True)}

    row = await repository.update_member(
        kind.key,
        member_id,
        nickname=merged["nickname"],
        email=merged["email"],
        level=merged["level"],
        experience=merged["experience"],
    )
    if row is None:
        raise errors.NotFoundError(kind.name, member_id)
    return _to_resource(kind, row)


async def _delete_member(kind: MemberKind, member_id: int) -> dict:
    await _require_member(kind, member_id)

    # Not atomic: a failure after this point can leave the member without credentials.
    await auth_service.revoke_credentials(kind.key, member_id)
    await repository.delete_member(kind.key, member_id)
    logger.info("Deleted %s %s.", kind.key, member_id)

    return links.confirmation(f"{kind.name} deleted successfully!", kind.recovery_links())


# Admin resource: players.


async def list_players() -> dict:
    return await _list_members(PLAYER)


async def get_player(player_id: int) -> dict:
    return _to_resource(PLAYER, await _require_member(PLAYER, player_id))


async def create_player(payload: schemas.MemberCreate) -> dict:
    return await _create_member(PLAYER, payload)


async def update_player(player_id: int, payload: schemas.MemberUpdate) -> dict:
    return await _update_member(PLAYER, player_id, payload)


async def delete_player(player_id: int) -> dict:
    return await _delete_member(PLAYER, player_id)


async def player_games(player_id: int, self_link: dict | None = None) -> dict:
    await _require_member(PLAYER, player_id)
    rows = await game_repository.list_games_for_player(player_id)
    self_link = self_link or links.link("self", "admins", "player_games", player_id=player_id)
    return links.collection([game_service.to_resource(row) for row in rows], [self_link])


async def player_items(player_id: int, self_link: dict | None = None) -> dict:
    await _require_member(PLAYER, player_id)
    rows = await item_repository.list_items_for_player(player_id)
    self_link = self_link or links.link("self", "admins", "player_items", player_id=player_id)
    return game_service.item_collection(rows, self_link)


async def player_achievements(player_id: int, self_link: dict | None = None) -> dict:
    await _require_member(PLAYER, player_id)
    rows = await achievement_repository.list_achievements_for_player(player_id)
    self_link = self_link or links.link("self", "admins", "player_achievements", player_id=player_id)
    return game_service.achievement_collection(rows, self_link)


# Admin resource: admins.


async def list_admins() -> dict:
    return await _list_members(ADMIN)


async def get_admin(admin_id: int) -> dict:
    return _to_resource(ADMIN, await _require_member(ADMIN, admin_id))


async def create_admin(payload: schemas.MemberCreate) -> dict:
    return await _create_member(ADMIN, payload)


async def update_admin(admin_id: int, payload: schemas.MemberUpdate) -> dict:
    return await _update_member(ADMIN, admin_id, payload)


async def delete_admin(admin_id: int) -> dict:
    return await _delete_member(ADMIN, admin_id)


# Player self-service.


async def register_player(payload: schemas.PlayerRegister) -> dict:
    row = await _insert_with_credentials(
        PLAYER,
        nickname=payload.nickname,
        email=payload.email,
        level=1,
        experience=0,
        password=payload.password,
    )
    return links.resource(mapper.to_player_dto(row), links.self_service_links())


def _own_player_id(user_row: dict) -> int:
    player_id = user_row.get("player_id")
    if player_id is None:
        raise errors.NotFoundError("Player", f"for user {user_row.get('username')}")
    return int(player_id)


async def me(user_row: dict) -> dict:
    row = await _require_member(PLAYER, _own_player_id(user_row))
    return links.resource(mapper.to_player_dto(row), links.self_service_links())


async def my_games(user_row: dict) -> dict:
    return await player_games(_own_player_id(user_row), links.link("self", "players", "my_games"))


async def my_items(user_row: dict) -> dict:
    return await player_items(_own_player_id(user_row), links.link("self", "players", "my_items"))


async def my_achievements(user_row: dict) -> dict:
    return await player_achievements(
        _own_player_id(user_row),
        links.link("self", "players", "my_achievements"),
    )


async def _require_owned_game(player_id: int, game_id: int) -> None:
    if not await repository.player_owns_game(player_id, game_id):
        raise errors.ConflictError(f"Player {player_id} does not own game {game_id}.")


async def acquire_game(user_row: dict, game_id: int) -> dict:
    player_id = _own_player_id(user_row)
    await game_service.require_game(game_id)
    await repository.add_player_game(player_id, game_id)
    logger.info("Player %s acquired game %s.", player_id, game_id)
    return await my_games(user_row)


async def collect_item(user_row: dict, item_id: int) -> dict:
    player_id = _own_player_id(user_row)
    item = await item_repository.get_item(item_id)
    if item is None:
        raise errors.NotFoundError("Item", item_id)
    await _require_owned_game(player_id, int(item["game_id"]))
    await repository.add_player_item(player_id, item_id)
    return await my_items(user_row)


async def unlock_achievement(user_row: dict, achievement_id: int) -> dict:
    player_id = _own_player_id(user_row)
    achievement = await achievement_repository.get_achievement(achievement_id)
    if achievement is None:
        raise errors.NotFoundError("Achievement", achievement_id)
    await _require_owned_game(player_id, int(achievement["game_id"]))
    await repository.add_player_achievement(player_id, achievement_id)
    return await my_achievements(user_row)


async def ensure_bootstrap_admin() -> None:
    """
    Create the admin named by BOOTSTRAP_ADMIN_USERNAME (with its credential)
    unless a credential with that username already exists.
    """
    bootstrap = settings.bootstrap_admin()
    if bootstrap is None:
        return None
    username, password = bootstrap

    if await auth_repository.get_user_by_username(username) is not None:
        return None

    row = await repository.get_member_by_nickname(ADMIN.key, username)
    if row is None:
        row = await repository.insert_member(ADMIN.key, nickname=username, email=None, level=1, experience=0)
    await auth_service.issue_credentials(
        username=username,
        password=password,
        role=Role.ADMIN,
        admin_id=int(row["id"]),
    )
    logger.info("Bootstrapped admin %r.", username)
