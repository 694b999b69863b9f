from __future__ import annotations

from . import schemas


def to_player_dto(row: dict) -> schemas.PlayerDto:
    return schemas.PlayerDto(
        id=int(row["id"]),
        nickname=str(row["nickname"]),
        email=row.get("email"),
        level=int(row["level"]),
        experience=int(row["experience"]),
    )


def to_admin_dto(row: dict) -> schemas.AdminDto:
    return schemas.AdminDto(
        id=int(row["id"]),
        nickname=str(row["nickname"]),
        email=row.get("email"),
        level=int(row["level"]),
        experience=int(row["experience"]),
    )
