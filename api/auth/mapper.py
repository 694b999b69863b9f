"""
Credential row -> transfer representation. The password hash never leaves here.
"""

from __future__ import annotations

from . import schemas


def to_user_response(user_row: dict) -> schemas.UserResponse:
    return schemas.UserResponse(
        id=int(user_row["id"]),
        username=str(user_row["username"]),
        role=schemas.Role(str(user_row["role"])),
        player_id=user_row.get("player_id"),
        admin_id=user_row.get("admin_id"),
    )
