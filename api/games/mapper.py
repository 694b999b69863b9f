from __future__ import annotations

from . import schemas


def to_dto(row: dict) -> schemas.GameDto:
    return schemas.GameDto(
        id=int(row["id"]),
        title=str(row["title"]),
        genre=row.get("genre"),
        description=row.get("description"),
    )
