"""
Player/admin persistence (raw SQL).

Both kinds live in identically shaped tables; `kind` is "player" or "admin"
and picks the table from a fixed map, never from user input.
"""

from __future__ import annotations

import asyncpg

from core import db, errors

_TABLES = {"player": "players", "admin": "admins"}
_KIND_NAMES = {"player": "Player", "admin": "Admin"}
_MEMBER_COLUMNS = "id, nickname, email, level, experience"


async def list_members(kind: str) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_MEMBER_COLUMNS}
        FROM {_TABLES[kind]}
        ORDER BY id ASC
        """
    )


async def get_member(kind: str, member_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_MEMBER_COLUMNS}
        FROM {_TABLES[kind]}
        WHERE id = $1
        """,
        member_id,
    )


async def get_member_by_nickname(kind: str, nickname: str) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_MEMBER_COLUMNS}
        FROM {_TABLES[kind]}
        WHERE nickname = $1
        """,
        nickname,
    )


async def insert_member(
    kind: str,
    *,
    nickname: str,
    email: str | None,
    level: int,
    experience: int,
) -> dict:
    try:
        row = await db.fetch_one(
            f"""
            INSERT INTO {_TABLES[kind]} (nickname, email, level, experience)
            VALUES ($1, $2, $3, $4)
            RETURNING {_MEMBER_COLUMNS}
            """,
            nickname,
            email,
            level,
            experience,
        )
    except asyncpg.UniqueViolationError as exc:
        raise errors.duplicate(_KIND_NAMES[kind], "nickname", nickname) from exc
    if row is None:
        raise RuntimeError(f"Failed to insert {kind}.")
    return row


async def update_member(
    kind: str,
    member_id: int,
    *,
    nickname: str,
    email: str | None,
    level: int,
    experience: int,
) -> dict | None:
    try:
        return await db.fetch_one(
            f"""
            UPDATE {_TABLES[kind]}
            SET nickname = $2,
                email = $3,
                level = $4,
                experience = $5
            WHERE id = $1
            RETURNING {_MEMBER_COLUMNS}
            """,
            member_id,
            nickname,
            email,
            level,
            experience,
        )
    except asyncpg.UniqueViolationError as exc:
        raise errors.duplicate(_KIND_NAMES[kind], "nickname", nickname) from exc


async def delete_member(kind: str, member_id: int) -> bool:
    status = await db.execute(
        f"""
        DELETE FROM {_TABLES[kind]}
        WHERE id = $1
        """,
        member_id,
    )
    return db.affected_rows(status) > 0


async def player_owns_game(player_id: int, game_id: int) -> bool:
    owned = await db.fetch_value(
        """
        SELECT EXISTS (
            SELECT 1
            FROM player_games
            WHERE player_id = $1
              AND game_id = $2
        )
        """,
        player_id,
        game_id,
    )
    return bool(owned)


async def add_player_game(player_id: int, game_id: int) -> None:
    await db.execute(
        """
        INSERT INTO player_games (player_id, game_id)
        VALUES ($1, $2)
        ON CONFLICT DO NOTHING
        """,
        player_id,
        game_id,
    )


async def add_player_achievement(player_id: int, achievement_id: int) -> None:
    await db.execute(
        """
        INSERT INTO player_achievements (player_id, achievement_id)
        VALUES ($1, $2)
        ON CONFLICT DO NOTHING
        """,
        player_id,
        achievement_id,
    )


async def add_player_item(player_id: int, item_id: int) -> None:
    await db.execute(
        """
        INSERT INTO player_items (player_id, item_id)
        VALUES ($1, $2)
        ON CONFLICT DO NOTHING
        """,
        player_id,
        item_id,
    )
