"""
Item business logic.
"""

from __future__ import annotations

import logging

from core import errors, links
from games import repository as game_repository

from . import mapper, repository, schemas

logger = logging.getLogger(__name__)

KIND = "Item"


def to_resource(row: dict) -> dict:
    dto = mapper.to_dto(row)
    return links.resource(dto, links.item_links(dto.id, dto.game_id))


async def require_item(item_id: int) -> dict:
    row = await repository.get_item(item_id)
    if row is None:
        raise errors.NotFoundError(KIND, item_id)
    return row


async def _require_game(game_id: int) -> None:
    if await game_repository.get_game(game_id) is None:
        raise errors.NotFoundError("Game", game_id)


async def list_items() -> dict:
    rows = await repository.list_items()
    return links.collection(
        [to_resource(row) for row in rows],
        [
            links.link("self", "items", "list"),
            links.link("create", "items", "create"),
        ],
    )


async def get_item(item_id: int) -> dict:
    return to_resource(await require_item(item_id))


async def create_item(payload: schemas.ItemCreate) -> dict:
    await _require_game(payload.game_id)
    row = await repository.insert_item(
        name=payload.name,
        description=payload.description,
        attributes=payload.attributes,
        game_id=payload.game_id,
    )
    logger.info("Created item %s for game %s.", row["id"], row["game_id"])
    return to_resource(row)


async def update_item(item_id: int, payload: schemas.ItemUpdate) -> dict:
    existing = await require_item(item_id)
    changes = payload.model_dump(exclude_none=True)
    if "game_id" in changes:
        await _require_game(changes["game_id"])
    merged = {**existing, **changes}

    row = await repository.update_item(
        item_id,
        name=merged["name"],
        description=merged["description"],
        attributes=mapper.to_dto(merged).attributes,
        game_id=merged["game_id"],
    )
    if row is None:
        raise errors.NotFoundError(KIND, item_id)
    return to_resource(row)


async def delete_item(item_id: int) -> dict:
    await require_item(item_id)
    await repository.delete_item(item_id)
    logger.info("Deleted item %s.", item_id)

    return links.confirmation(
        "Item deleted successfully!",
        [
            links.link("all-items", "items", "list"),
            links.link("create", "items", "create"),
        ],
    )
