"""
Game persistence (raw SQL).
"""

from __future__ import annotations

import asyncpg

from core import db, errors

_GAME_COLUMNS = "id, title, genre, description"


async def list_games() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_GAME_COLUMNS}
        FROM games
        ORDER BY id ASC
        """
    )


async def get_game(game_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_GAME_COLUMNS}
        FROM games
        WHERE id = $1
        """,
        game_id,
    )


async def get_game_by_title(title: str) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_GAME_COLUMNS}
        FROM games
        WHERE title = $1
        """,
        title,
    )


async def list_games_for_player(player_id: int) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT g.id, g.title, g.genre, g.description
        FROM player_games pg
        JOIN games g ON g.id = pg.game_id
        WHERE pg.player_id = $1
        ORDER BY g.id ASC
        """,
        player_id,
    )


async def insert_game(*, title: str, genre: str | None, description: str | None) -> dict:
    try:
        row = await db.fetch_one(
            f"""
            INSERT INTO games (title, genre, description)
            VALUES ($1, $2, $3)
            RETURNING {_GAME_COLUMNS}
            """,
            title,
            genre,
            description,
        )
    except asyncpg.UniqueViolationError as exc:
        raise errors.duplicate("Game", "title", title) from exc
    if row is None:
        raise RuntimeError("Failed to insert game.")
    return row


async def update_game(game_id: int, *, title: str, genre: str | None, description: str | None) -> dict | None:
    try:
        return await db.fetch_one(
            f"""
            UPDATE games
            SET title = $2,
                genre = $3,
                description = $4
            WHERE id = $1
            RETURNING {_GAME_COLUMNS}
            """,
            game_id,
            title,
            genre,
            description,
        )
    except asyncpg.UniqueViolationError as exc:
        raise errors.duplicate("Game", "title", title) from exc


async def delete_game(game_id: int) -> bool:
    # Achievements, items and ownership rows go with it (ON DELETE CASCADE).
    status = await db.execute(
        """
        DELETE FROM games
        WHERE id = $1
        """,
        game_id,
    )
    return db.affected_rows(status) > 0
