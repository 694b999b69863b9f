"""
Achievement persistence (raw SQL).
"""

from __future__ import annotations

from core import db

_ACHIEVEMENT_COLUMNS = "id, name, description, game_id"


async def list_achievements() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_ACHIEVEMENT_COLUMNS}
        FROM achievements
        ORDER BY id ASC
        """
    )


async def get_achievement(achievement_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_ACHIEVEMENT_COLUMNS}
        FROM achievements
        WHERE id = $1
        """,
        achievement_id,
    )


async def list_achievements_for_game(game_id: int) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_ACHIEVEMENT_COLUMNS}
        FROM achievements
        WHERE game_id = $1
        ORDER BY id ASC
        """,
        game_id,
    )


async def list_achievements_for_player(player_id: int) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT a.id, a.name, a.description, a.game_id
        FROM player_achievements pa
        JOIN achievements a ON a.id = pa.achievement_id
        WHERE pa.player_id = $1
        ORDER BY a.id ASC
        """,
        player_id,
    )


async def insert_achievement(*, name: str, description: str | None, game_id: int) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO achievements (name, description, game_id)
        VALUES ($1, $2, $3)
        RETURNING {_ACHIEVEMENT_COLUMNS}
        """,
        name,
        description,
        game_id,
    )
    if row is None:
        raise RuntimeError("Failed to insert achievement.")
    return row


async def update_achievement(
    achievement_id: int,
    *,
    name: str,
    description: str | None,
    game_id: int,
) -> dict | None:
    return await db.fetch_one(
        f"""
        UPDATE achievements
        SET name = $2,
            description = $3,
            game_id = $4
        WHERE id = $1
        RETURNING {_ACHIEVEMENT_COLUMNS}
        """,
        achievement_id,
        name,
        description,
        game_id,
    )


async def delete_achievement(achievement_id: int) -> bool:
    status = await db.execute(
        """
        DELETE FROM achievements
        WHERE id = $1
        """,
        achievement_id,
    )
    return db.affected_rows(status) > 0
