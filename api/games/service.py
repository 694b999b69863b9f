"""
Game business logic.

Every operation follows the same shape: load from the store (404 when the
id or title is unknown), map to a DTO, attach the game link set.
"""

from __future__ import annotations

import logging

from achievements import mapper as achievement_mapper
from achievements import repository as achievement_repository
from core import errors, links
from items import mapper as item_mapper
from items import repository as item_repository

from . import mapper, repository, schemas

logger = logging.getLogger(__name__)

KIND = "Game"


def to_resource(row: dict) -> dict:
    dto = mapper.to_dto(row)
    return links.resource(dto, links.game_links(dto.id))


async def require_game(game_id: int) -> dict:
    row = await repository.get_game(game_id)
    if row is None:
        raise errors.NotFoundError(KIND, game_id)
    return row


async def require_game_by_title(title: str) -> dict:
    row = await repository.get_game_by_title(title)
    if row is None:
        raise errors.NotFoundError(KIND, title)
    return row


def achievement_collection(rows: list[dict], self_link: dict) -> dict:
    resources = []
    for row in rows:
        dto = achievement_mapper.to_dto(row)
        resources.append(links.resource(dto, links.achievement_links(dto.id, dto.game_id)))
    return links.collection(resources, [self_link])


def item_collection(rows: list[dict], self_link: dict) -> dict:
    resources = []
    for row in rows:
        dto = item_mapper.to_dto(row)
        resources.append(links.resource(dto, links.item_links(dto.id, dto.game_id)))
    return links.collection(resources, [self_link])


async def list_games() -> dict:
    rows = await repository.list_games()
    return links.collection(
        [to_resource(row) for row in rows],
        [
            links.link("self", "games", "list"),
            links.link("create", "games", "create"),
        ],
    )


async def get_game(game_id: int) -> dict:
    return to_resource(await require_game(game_id))


async def game_achievements(game_id: int) -> dict:
    game = await require_game(game_id)
    rows = await achievement_repository.list_achievements_for_game(int(game["id"]))
    return achievement_collection(rows, links.link("self", "games", "achievements", game_id=game_id))


async def game_items(game_id: int) -> dict:
    game = await require_game(game_id)
    rows = await item_repository.list_items_for_game(int(game["id"]))
    return item_collection(rows, links.link("self", "games", "items", game_id=game_id))


async def game_achievements_by_name(name: str) -> dict:
    game = await require_game_by_title(name)
    rows = await achievement_repository.list_achievements_for_game(int(game["id"]))
    return achievement_collection(rows, links.link("self", "games", "achievements_by_name", name=name))


async def game_items_by_name(name: str) -> dict:
    game = await require_game_by_title(name)
    rows = await item_repository.list_items_for_game(int(game["id"]))
    return item_collection(rows, links.link("self", "games", "items_by_name", name=name))


async def create_game(payload: schemas.GameCreate) -> dict:
    row = await repository.insert_game(
        title=payload.title,
        genre=payload.genre,
        description=payload.description,
    )
    logger.info("Created game %s (%r).", row["id"], row["title"])
    return to_resource(row)


async def update_game(game_id: int, payload: schemas.GameUpdate) -> dict:
    existing = await require_game(game_id)
    merged = {**existing, **payload.model_dump(exclude_none=True)}

    row = await repository.update_game(
        game_id,
        title=merged["title"],
        genre=merged["genre"],
        description=merged["description"],
    )
    if row is None:
        raise errors.NotFoundError(KIND, game_id)
    return to_resource(row)


async def delete_game(game_id: int) -> dict:
    await require_game(game_id)
    await repository.delete_game(game_id)
    logger.info("Deleted game %s.", game_id)

    return links.confirmation(
        "Game deleted successfully!",
        [
            links.link("all-games", "games", "list"),
            links.link("create", "games", "create"),
        ],
    )
