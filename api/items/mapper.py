from __future__ import annotations

import json
from typing import Any

from . import schemas


def _attributes(value: Any) -> dict[str, Any]:
    # asyncpg hands jsonb back as text unless a codec is registered.
    if value is None:
        return {}
    if isinstance(value, str):
        value = json.loads(value)
    return dict(value)


def to_dto(row: dict) -> schemas.ItemDto:
    return schemas.ItemDto(
        id=int(row["id"]),
        name=str(row["name"]),
        description=row.get("description"),
        attributes=_attributes(row.get("attributes")),
        game_id=int(row["game_id"]),
    )
