"""
Access policy: which roles may call which route.

`POLICY` is keyed by the same (controller, action) pairs as `core.links.ROUTES`.
A value of None marks an open route. Routers attach `guard(...)` as a
dependency, so the check runs before the handler touches the store.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi import Depends, HTTPException, status

from . import dependencies
from .schemas import Role

ADMIN_ONLY = frozenset({Role.ADMIN})
PLAYER_ONLY = frozenset({Role.PLAYER})
ANY_ROLE = frozenset({Role.ADMIN, Role.PLAYER})

POLICY: dict[tuple[str, str], frozenset[Role] | None] = {
    ("games", "list"): ADMIN_ONLY,
    ("games", "get"): ADMIN_ONLY,
    ("games", "create"): ADMIN_ONLY,
    ("games", "update"): ADMIN_ONLY,
    ("games", "delete"): ADMIN_ONLY,
    ("games", "achievements"): ADMIN_ONLY,
    ("games", "items"): ADMIN_ONLY,
    ("games", "achievements_by_name"): ANY_ROLE,
    ("games", "items_by_name"): ANY_ROLE,
    ("achievements", "list"): ADMIN_ONLY,
    ("achievements", "get"): ADMIN_ONLY,
    ("achievements", "create"): ADMIN_ONLY,
    ("achievements", "update"): ADMIN_ONLY,
    ("achievements", "delete"): ADMIN_ONLY,
    ("items", "list"): ADMIN_ONLY,
    ("items", "get"): ADMIN_ONLY,
    ("items", "create"): ADMIN_ONLY,
    ("items", "update"): ADMIN_ONLY,
    ("items", "delete"): ADMIN_ONLY,
    ("admins", "players"): ADMIN_ONLY,
    ("admins", "player"): ADMIN_ONLY,
    ("admins", "player_games"): ADMIN_ONLY,
    ("admins", "player_items"): ADMIN_ONLY,
    ("admins", "player_achievements"): ADMIN_ONLY,
    ("admins", "create_player"): ADMIN_ONLY,
    ("admins", "update_player"): ADMIN_ONLY,
    ("admins", "delete_player"): ADMIN_ONLY,
    ("admins", "list"): ADMIN_ONLY,
    ("admins", "get"): ADMIN_ONLY,
    ("admins", "create"): ADMIN_ONLY,
    ("admins", "update"): ADMIN_ONLY,
    ("admins", "delete"): ADMIN_ONLY,
    ("players", "register"): None,
    ("players", "me"): PLAYER_ONLY,
    ("players", "my_games"): PLAYER_ONLY,
    ("players", "my_items"): PLAYER_ONLY,
    ("players", "my_achievements"): PLAYER_ONLY,
    ("players", "acquire_game"): PLAYER_ONLY,
    ("players", "collect_item"): PLAYER_ONLY,
    ("players", "unlock_achievement"): PLAYER_ONLY,
    ("auth", "login"): None,
    ("auth", "me"): ANY_ROLE,
}


def is_allowed(role: str | Role | None, controller: str, action: str) -> bool:
    allowed = POLICY[(controller, action)]
    if allowed is None:
        return True
    try:
        return Role(role) in allowed
    except ValueError:
        return False


def guard(controller: str, action: str) -> Callable[..., Awaitable[dict | None]]:
    """
    Build the dependency enforcing POLICY for one route.

    Resolves to the caller's credential row, or None on open routes.
    """
    if (controller, action) not in POLICY:
        raise KeyError(f"No access rule for {controller}.{action}.")

    if POLICY[(controller, action)] is None:

        async def _open() -> None:
            return None

        return _open

    async def _check(user_row: dict = Depends(dependencies.get_current_user)) -> dict:
        if not is_allowed(user_row.get("role"), controller, action):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Role {user_row.get('role')} may not access {controller}.{action}.",
            )
        return user_row

    return _check
