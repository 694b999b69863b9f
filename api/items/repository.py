"""
Item persistence (raw SQL).
"""

from __future__ import annotations

import json
from typing import Any

from core import db

_ITEM_COLUMNS = "id, name, description, attributes, game_id"


def _json_arg(value: dict[str, Any] | None) -> str:
    """
    asyncpg does not encode Python dicts for jsonb parameters.
    We pass JSON as a string and cast to jsonb in SQL.
    """
    return json.dumps(value or {}, ensure_ascii=True)


async def list_items() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_ITEM_COLUMNS}
        FROM items
        ORDER BY id ASC
        """
    )


async def get_item(item_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_ITEM_COLUMNS}
        FROM items
        WHERE id = $1
        """,
        item_id,
    )


async def list_items_for_game(game_id: int) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_ITEM_COLUMNS}
        FROM items
        WHERE game_id = $1
        ORDER BY id ASC
        """,
        game_id,
    )


async def list_items_for_player(player_id: int) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT i.id, i.name, i.description, i.attributes, i.game_id
        FROM player_items pi
        JOIN items i ON i.id = pi.item_id
        WHERE pi.player_id = $1
        ORDER BY i.id ASC
        """,
        player_id,
    )


async def insert_item(
    *,
    name: str,
    description: str | None,
    attributes: dict[str, Any],
    game_id: int,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO items (name, description, attributes, game_id)
        VALUES ($1, $2, $3::jsonb, $4)
        RETURNING {_ITEM_COLUMNS}
        """,
        name,
        description,
        _json_arg(attributes),
        game_id,
    )
    if row is None:
        raise RuntimeError("Failed to insert item.")
    return row


async def update_item(
    item_id: int,
    *,
    name: str,
    description: str | None,
    attributes: dict[str, Any],
    game_id: int,
) -> dict | None:
    return await db.fetch_one(
        f"""
        UPDATE items
        SET name = $2,
            description = $3,
            attributes = $4::jsonb,
            game_id = $5
        WHERE id = $1
        RETURNING {_ITEM_COLUMNS}
        """,
        item_id,
        name,
        description,
        _json_arg(attributes),
        game_id,
    )


async def delete_item(item_id: int) -> bool:
    status = await db.execute(
        """
        DELETE FROM items
        WHERE id = $1
        """,
        item_id,
    )
    return db.affected_rows(status) > 0
