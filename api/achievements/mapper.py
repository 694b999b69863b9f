from __future__ import annotations

from . import schemas


def to_dto(row: dict) -> schemas.AchievementDto:
    return schemas.AchievementDto(
        id=int(row["id"]),
        name=str(row["name"]),
        description=row.get("description"),
        game_id=int(row["game_id"]),
    )
