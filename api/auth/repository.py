"""
Credential (app_users) persistence helpers.
"""

from __future__ import annotations

import asyncpg

from core import db, errors

_USER_COLUMNS = "id, username, password_hash, role, player_id, admin_id"

# Which app_users column points at each member kind.
_MEMBER_COLUMNS = {"player": "player_id", "admin": "admin_id"}


def normalize_username(username: str) -> str:
    return (username or "").strip()


async def create_user(
    *,
    username: str,
    password_hash: str,
    role: str,
    player_id: int | None = None,
    admin_id: int | None = None,
) -> dict:
    try:
        row = await db.fetch_one(
            f"""
            INSERT INTO app_users (username, password_hash, role, player_id, admin_id)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {_USER_COLUMNS}
            """,
            normalize_username(username),
            password_hash,
            role,
            player_id,
            admin_id,
        )
    except asyncpg.UniqueViolationError as exc:
        raise errors.duplicate("User", "username", username) from exc
    if row is None:
        raise RuntimeError("Failed to create user.")
    return row


async def get_user_by_username(username: str) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_USER_COLUMNS}
        FROM app_users
        WHERE username = $1
        """,
        normalize_username(username),
    )


async def get_user_by_id(user_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_USER_COLUMNS}
        FROM app_users
        WHERE id = $1
        """,
        user_id,
    )


async def get_user_for_member(kind: str, member_id: int) -> dict | None:
    column = _MEMBER_COLUMNS[kind]
    return await db.fetch_one(
        f"""
        SELECT {_USER_COLUMNS}
        FROM app_users
        WHERE {column} = $1
        """,
        member_id,
    )


async def detach_user(user_id: int) -> None:
    await db.execute(
        """
        UPDATE app_users
        SET player_id = NULL,
            admin_id = NULL
        WHERE id = $1
        """,
        user_id,
    )


async def delete_user(user_id: int) -> bool:
    status = await db.execute(
        """
        DELETE FROM app_users
        WHERE id = $1
        """,
        user_id,
    )
    return db.affected_rows(status) > 0
