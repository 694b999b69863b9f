"""
Database schema (idempotent DDL).

One table per entity; relationships are plain id columns and join tables.
Applied on startup when DB_AUTO_SCHEMA is enabled.
"""

from __future__ import annotations

import logging

from core import db

logger = logging.getLogger(__name__)

STATEMENTS: tuple[str, ...] = (
    """
    CREATE TABLE IF NOT EXISTS games (
        id          BIGSERIAL PRIMARY KEY,
        title       TEXT NOT NULL UNIQUE,
        genre       TEXT,
        description TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS achievements (
        id          BIGSERIAL PRIMARY KEY,
        name        TEXT NOT NULL,
        description TEXT,
        game_id     BIGINT NOT NULL REFERENCES games (id) ON DELETE CASCADE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS items (
        id          BIGSERIAL PRIMARY KEY,
        name        TEXT NOT NULL,
        description TEXT,
        attributes  JSONB NOT NULL DEFAULT '{}'::jsonb,
        game_id     BIGINT NOT NULL REFERENCES games (id) ON DELETE CASCADE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS players (
        id         BIGSERIAL PRIMARY KEY,
        nickname   TEXT NOT NULL UNIQUE,
        email      TEXT,
        level      INTEGER NOT NULL DEFAULT 1,
        experience BIGINT NOT NULL DEFAULT 0
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS admins (
        id         BIGSERIAL PRIMARY KEY,
        nickname   TEXT NOT NULL UNIQUE,
        email      TEXT,
        level      INTEGER NOT NULL DEFAULT 1,
        experience BIGINT NOT NULL DEFAULT 0
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS app_users (
        id            BIGSERIAL PRIMARY KEY,
        username      TEXT NOT NULL UNIQUE,
        password_hash TEXT NOT NULL,
        role          TEXT NOT NULL CHECK (role IN ('ADMIN', 'PLAYER')),
        player_id     BIGINT UNIQUE REFERENCES players (id) ON DELETE SET NULL,
        admin_id      BIGINT UNIQUE REFERENCES admins (id) ON DELETE SET NULL,
        CHECK (player_id IS NULL OR admin_id IS NULL)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS player_games (
        player_id BIGINT NOT NULL REFERENCES players (id) ON DELETE CASCADE,
        game_id   BIGINT NOT NULL REFERENCES games (id) ON DELETE CASCADE,
        PRIMARY KEY (player_id, game_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS player_achievements (
        player_id      BIGINT NOT NULL REFERENCES players (id) ON DELETE CASCADE,
        achievement_id BIGINT NOT NULL REFERENCES achievements (id) ON DELETE CASCADE,
        PRIMARY KEY (player_id, achievement_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS player_items (
        player_id BIGINT NOT NULL REFERENCES players (id) ON DELETE CASCADE,
        item_id   BIGINT NOT NULL REFERENCES items (id) ON DELETE CASCADE,
        PRIMARY KEY (player_id, item_id)
    )
    """,
)


async def apply_schema() -> None:
    async with db.transaction() as conn:
        for statement in STATEMENTS:
            await conn.execute(statement)
    logger.info("Database schema ensured (%d statements).", len(STATEMENTS))
