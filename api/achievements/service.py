"""
Achievement business logic.
"""

from __future__ import annotations

import logging

from core import errors, links
from games import repository as game_repository

from . import mapper, repository, schemas

logger = logging.getLogger(__name__)

KIND = "Achievement"


def to_resource(row: dict) -> dict:
    dto = mapper.to_dto(row)
    return links.resource(dto, links.achievement_links(dto.id, dto.game_id))


async def require_achievement(achievement_id: int) -> dict:
    row = await repository.get_achievement(achievement_id)
    if row is None:
        raise errors.NotFoundError(KIND, achievement_id)
    return row


async def _require_game(game_id: int) -> None:
    if await game_repository.get_game(game_id) is None:
        raise errors.NotFoundError("Game", game_id)


async def list_achievements() -> dict:
    rows = await repository.list_achievements()
    return links.collection(
        [to_resource(row) for row in rows],
        [
            links.link("self", "achievements", "list"),
            links.link("create", "achievements", "create"),
        ],
    )


async def get_achievement(achievement_id: int) -> dict:
    return to_resource(await require_achievement(achievement_id))


async def create_achievement(payload: schemas.AchievementCreate) -> dict:
    await _require_game(payload.game_id)
    row = await repository.insert_achievement(
        name=payload.name,
        description=payload.description,
        game_id=payload.game_id,
    )
    logger.info("Created achievement %s for game %s.", row["id"], row["game_id"])
    return to_resource(row)


async def update_achievement(achievement_id: int, payload: schemas.AchievementUpdate) -> dict:
    existing = await require_achievement(achievement_id)
    changes = payload.model_dump(exclude_none=True)
    if "game_id" in changes:
        await _require_game(changes["game_id"])
    merged = {**existing, **changes}

    row = await repository.update_achievement(
        achievement_id,
        name=merged["name"],
        description=merged["description"],
        game_id=merged["game_id"],
    )
    if row is None:
        raise errors.NotFoundError(KIND, achievement_id)
    return to_resource(row)


async def delete_achievement(achievement_id: int) -> dict:
    await require_achievement(achievement_id)
    await repository.delete_achievement(achievement_id)
    logger.info("Deleted achievement %s.", achievement_id)

    return links.confirmation(
        "Achievement deleted successfully!",
        [
            links.link("all-achievements", "achievements", "list"),
            links.link("create", "achievements", "create"),
        ],
    )
