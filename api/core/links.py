"""
Hypermedia links and response envelopes.

Routes are described once in `ROUTES`, keyed by (controller, action), and
rendered by string substitution of percent-encoded parameters. Link sets per entity are fixed:
every relation is present for any resolved resource.

Shapes:
- link:         {"rel": "self", "href": "/games/1", "method": "GET"}
- resource:     {<dto fields>, "links": [link, ...]}
- collection:   {"items": [resource, ...], "links": [link, ...]}
- confirmation: {"message": "...", "links": [link, ...]}
"""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel

ROUTES: dict[tuple[str, str], tuple[str, str]] = {
    # games
    ("games", "list"): ("GET", "/games"),
    ("games", "get"): ("GET", "/games/{game_id}"),
    ("games", "create"): ("POST", "/games"),
    ("games", "update"): ("PUT", "/games/{game_id}"),
    ("games", "delete"): ("DELETE", "/games/{game_id}"),
    ("games", "achievements"): ("GET", "/games/{game_id}/achievements"),
    ("games", "items"): ("GET", "/games/{game_id}/items"),
    ("games", "achievements_by_name"): ("GET", "/games/name/{name:path}/achievements"),
    ("games", "items_by_name"): ("GET", "/games/name/{name:path}/items"),
    # achievements
    ("achievements", "list"): ("GET", "/achievements"),
    ("achievements", "get"): ("GET", "/achievements/{achievement_id}"),
    ("achievements", "create"): ("POST", "/achievements"),
    ("achievements", "update"): ("PUT", "/achievements/{achievement_id}"),
    ("achievements", "delete"): ("DELETE", "/achievements/{achievement_id}"),
    # items
    ("items", "list"): ("GET", "/items"),
    ("items", "get"): ("GET", "/items/{item_id}"),
    ("items", "create"): ("POST", "/items"),
    ("items", "update"): ("PUT", "/items/{item_id}"),
    ("items", "delete"): ("DELETE", "/items/{item_id}"),
    # admin resource: players
    ("admins", "players"): ("GET", "/admins/players"),
    ("admins", "player"): ("GET", "/admins/players/{player_id}"),
    ("admins", "player_games"): ("GET", "/admins/players/{player_id}/games"),
    ("admins", "player_items"): ("GET", "/admins/players/{player_id}/items"),
    ("admins", "player_achievements"): ("GET", "/admins/players/{player_id}/achievements"),
    ("admins", "create_player"): ("POST", "/admins/create-players"),
    ("admins", "update_player"): ("PUT", "/admins/players/{player_id}/update"),
    ("admins", "delete_player"): ("DELETE", "/admins/players/{player_id}/delete"),
    # admin resource: admins
    ("admins", "list"): ("GET", "/admins/list"),
    ("admins", "get"): ("GET", "/admins/{admin_id}"),
    ("admins", "create"): ("POST", "/admins/create-admins"),
    ("admins", "update"): ("PUT", "/admins/{admin_id}/update"),
    ("admins", "delete"): ("DELETE", "/admins/{admin_id}/delete"),
    # player self-service
    ("players", "register"): ("POST", "/players/register"),
    ("players", "me"): ("GET", "/players/me"),
    ("players", "my_games"): ("GET", "/players/me/games"),
    ("players", "my_items"): ("GET", "/players/me/items"),
    ("players", "my_achievements"): ("GET", "/players/me/achievements"),
    ("players", "acquire_game"): ("POST", "/players/me/games/{game_id}"),
    ("players", "collect_item"): ("POST", "/players/me/items/{item_id}"),
    ("players", "unlock_achievement"): ("POST", "/players/me/achievements/{achievement_id}"),
    # auth
    ("auth", "login"): ("POST", "/auth/login"),
    ("auth", "me"): ("GET", "/auth/me"),
}


# "{name:path}" -> "{name}": Starlette converters are not format specs.
_CONVERTER = re.compile(r"\{(\w+):\w+\}")


def template(controller: str, action: str) -> str:
    """
    Path template for (controller, action) without Starlette converters,
    as it appears in the OpenAPI document.
    """
    _, path = ROUTES[(controller, action)]
    return _CONVERTER.sub(r"{\1}", path)


def route(controller: str, action: str, **params: Any) -> str:
    """
    Render the path for (controller, action), percent-encoding each parameter.

    Raises KeyError for an unknown route or a missing template parameter.
    """
    return template(controller, action).format(**{k: quote(str(v), safe="") for k, v in params.items()})


def link(rel: str, controller: str, action: str, **params: Any) -> dict[str, str]:
    method, _ = ROUTES[(controller, action)]
    return {"rel": rel, "href": route(controller, action, **params), "method": method}


def resource(dto: BaseModel | dict[str, Any], links: list[dict[str, str]]) -> dict[str, Any]:
    body = dto.model_dump() if isinstance(dto, BaseModel) else dict(dto)
    body["links"] = links
    return body


def collection(items: list[dict[str, Any]], links: list[dict[str, str]]) -> dict[str, Any]:
    return {"items": items, "links": links}


def confirmation(message: str, links: list[dict[str, str]]) -> dict[str, Any]:
    return {"message": message, "links": links}


# Per-entity link sets.


def game_links(game_id: int) -> list[dict[str, str]]:
    return [
        link("self", "games", "get", game_id=game_id),
        link("update", "games", "update", game_id=game_id),
        link("delete", "games", "delete", game_id=game_id),
        link("achievements", "games", "achievements", game_id=game_id),
        link("items", "games", "items", game_id=game_id),
        link("all-games", "games", "list"),
    ]


def achievement_links(achievement_id: int, game_id: int) -> list[dict[str, str]]:
    return [
        link("self", "achievements", "get", achievement_id=achievement_id),
        link("update", "achievements", "update", achievement_id=achievement_id),
        link("delete", "achievements", "delete", achievement_id=achievement_id),
        link("game", "games", "get", game_id=game_id),
        link("all-achievements", "achievements", "list"),
    ]


def item_links(item_id: int, game_id: int) -> list[dict[str, str]]:
    return [
        link("self", "items", "get", item_id=item_id),
        link("update", "items", "update", item_id=item_id),
        link("delete", "items", "delete", item_id=item_id),
        link("game", "games", "get", game_id=game_id),
        link("all-items", "items", "list"),
    ]


def player_links(player_id: int) -> list[dict[str, str]]:
    return [
        link("self", "admins", "player", player_id=player_id),
        link("update", "admins", "update_player", player_id=player_id),
        link("delete", "admins", "delete_player", player_id=player_id),
        link("games", "admins", "player_games", player_id=player_id),
        link("items", "admins", "player_items", player_id=player_id),
        link("achievements", "admins", "player_achievements", player_id=player_id),
        link("all-players", "admins", "players"),
    ]


def admin_links(admin_id: int) -> list[dict[str, str]]:
    return [
        link("self", "admins", "get", admin_id=admin_id),
        link("update", "admins", "update", admin_id=admin_id),
        link("delete", "admins", "delete", admin_id=admin_id),
        link("all-admins", "admins", "list"),
    ]


def self_service_links() -> list[dict[str, str]]:
    return [
        link("self", "players", "me"),
        link("games", "players", "my_games"),
        link("items", "players", "my_items"),
        link("achievements", "players", "my_achievements"),
    ]
