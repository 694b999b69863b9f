"""Pytest configuration.

Adds `api/` to `sys.path` so tests can import the feature packages
(`from games import service`) without an editable install, and provides an
in-memory stand-in for the Postgres store patched over every repository
function.
"""

from __future__ import annotations

import copy
import sys
from pathlib import Path

import pytest
import pytest_asyncio

API_PATH = Path(__file__).resolve().parents[1] / "api"
if str(API_PATH) not in sys.path:
    sys.path.insert(0, str(API_PATH))

from httpx import ASGITransport, AsyncClient  # noqa: E402

from achievements import repository as achievement_repository  # noqa: E402
from auth import repository as auth_repository  # noqa: E402
from auth import security  # noqa: E402
from core import errors  # noqa: E402
from games import repository as game_repository  # noqa: E402
from items import repository as item_repository  # noqa: E402
from main import app  # noqa: E402
from players import repository as player_repository  # noqa: E402

_TABLES = ("games", "achievements", "items", "players", "admins", "app_users")
_MEMBER_TABLES = {"player": "players", "admin": "admins"}
_MEMBER_NAMES = {"player": "Player", "admin": "Admin"}
_MEMBER_COLUMNS = {"player": "player_id", "admin": "admin_id"}


class InMemoryStore:
    """Dict-backed store with the same uniqueness and cascade rules as the schema."""

    def __init__(self) -> None:
        self.tables: dict[str, dict[int, dict]] = {name: {} for name in _TABLES}
        self.counters: dict[str, int] = {name: 0 for name in _TABLES}
        self.player_games: set[tuple[int, int]] = set()
        self.player_achievements: set[tuple[int, int]] = set()
        self.player_items: set[tuple[int, int]] = set()

    # -- helpers ---------------------------------------------------------

    def _insert(self, table: str, **values) -> dict:
        self.counters[table] += 1
        row = {"id": self.counters[table], **values}
        self.tables[table][row["id"]] = row
        return copy.deepcopy(row)

    def _get(self, table: str, row_id: int) -> dict | None:
        row = self.tables[table].get(row_id)
        return copy.deepcopy(row) if row is not None else None

    def _list(self, table: str, **filters) -> list[dict]:
        rows = [
            row
            for row in self.tables[table].values()
            if all(row.get(k) == v for k, v in filters.items())
        ]
        return [copy.deepcopy(row) for row in sorted(rows, key=lambda r: r["id"])]

    def _find(self, table: str, **filters) -> dict | None:
        rows = self._list(table, **filters)
        return rows[0] if rows else None

    def _check_unique(self, table: str, field: str, value, kind: str, exclude_id: int | None = None) -> None:
        for row in self.tables[table].values():
            if row[field] == value and row["id"] != exclude_id:
                raise errors.duplicate(kind, field, value)

    def _update(self, table: str, row_id: int, **values) -> dict | None:
        row = self.tables[table].get(row_id)
        if row is None:
            return None
        row.update(values)
        return copy.deepcopy(row)

    # -- games -----------------------------------------------------------

    async def list_games(self) -> list[dict]:
        return self._list("games")

    async def get_game(self, game_id: int) -> dict | None:
        return self._get("games", game_id)

    async def get_game_by_title(self, title: str) -> dict | None:
        return self._find("games", title=title)

    async def list_games_for_player(self, player_id: int) -> list[dict]:
        ids = {g for (p, g) in self.player_games if p == player_id}
        return [row for row in self._list("games") if row["id"] in ids]

    async def insert_game(self, *, title, genre, description) -> dict:
        self._check_unique("games", "title", title, "Game")
        return self._insert("games", title=title, genre=genre, description=description)

    async def update_game(self, game_id, *, title, genre, description) -> dict | None:
        self._check_unique("games", "title", title, "Game", exclude_id=game_id)
        return self._update("games", game_id, title=title, genre=genre, description=description)

    async def delete_game(self, game_id: int) -> bool:
        if self.tables["games"].pop(game_id, None) is None:
            return False
        for table, joins in (("achievements", "player_achievements"), ("items", "player_items")):
            doomed = {row_id for row_id, row in self.tables[table].items() if row["game_id"] == game_id}
            for row_id in doomed:
                del self.tables[table][row_id]
            setattr(self, joins, {(p, c) for (p, c) in getattr(self, joins) if c not in doomed})
        self.player_games = {(p, g) for (p, g) in self.player_games if g != game_id}
        return True

    # -- achievements ----------------------------------------------------

    async def list_achievements(self) -> list[dict]:
        return self._list("achievements")

    async def get_achievement(self, achievement_id: int) -> dict | None:
        return self._get("achievements", achievement_id)

    async def list_achievements_for_game(self, game_id: int) -> list[dict]:
        return self._list("achievements", game_id=game_id)

    async def list_achievements_for_player(self, player_id: int) -> list[dict]:
        ids = {a for (p, a) in self.player_achievements if p == player_id}
        return [row for row in self._list("achievements") if row["id"] in ids]

    async def insert_achievement(self, *, name, description, game_id) -> dict:
        return self._insert("achievements", name=name, description=description, game_id=game_id)

    async def update_achievement(self, achievement_id, *, name, description, game_id) -> dict | None:
        return self._update("achievements", achievement_id, name=name, description=description, game_id=game_id)

    async def delete_achievement(self, achievement_id: int) -> bool:
        if self.tables["achievements"].pop(achievement_id, None) is None:
            return False
        self.player_achievements = {(p, a) for (p, a) in self.player_achievements if a != achievement_id}
        return True

    # -- items -----------------------------------------------------------

    async def list_items(self) -> list[dict]:
        return self._list("items")

    async def get_item(self, item_id: int) -> dict | None:
        return self._get("items", item_id)

    async def list_items_for_game(self, game_id: int) -> list[dict]:
        return self._list("items", game_id=game_id)

    async def list_items_for_player(self, player_id: int) -> list[dict]:
        ids = {i for (p, i) in self.player_items if p == player_id}
        return [row for row in self._list("items") if row["id"] in ids]

    async def insert_item(self, *, name, description, attributes, game_id) -> dict:
        return self._insert(
            "items",
            name=name,
            description=description,
            attributes=dict(attributes or {}),
            game_id=game_id,
        )

    async def update_item(self, item_id, *, name, description, attributes, game_id) -> dict | None:
        return self._update(
            "items",
            item_id,
            name=name,
            description=description,
            attributes=dict(attributes or {}),
            game_id=game_id,
        )

    async def delete_item(self, item_id: int) -> bool:
        if self.tables["items"].pop(item_id, None) is None:
            return False
        self.player_items = {(p, i) for (p, i) in self.player_items if i != item_id}
        return True

    # -- players / admins ------------------------------------------------

    async def list_members(self, kind: str) -> list[dict]:
        return self._list(_MEMBER_TABLES[kind])

    async def get_member(self, kind: str, member_id: int) -> dict | None:
        return self._get(_MEMBER_TABLES[kind], member_id)

    async def get_member_by_nickname(self, kind: str, nickname: str) -> dict | None:
        return self._find(_MEMBER_TABLES[kind], nickname=nickname)

    async def insert_member(self, kind, *, nickname, email, level, experience) -> dict:
        table = _MEMBER_TABLES[kind]
        self._check_unique(table, "nickname", nickname, _MEMBER_NAMES[kind])
        return self._insert(table, nickname=nickname, email=email, level=level, experience=experience)

    async def update_member(self, kind, member_id, *, nickname, email, level, experience) -> dict | None:
        table = _MEMBER_TABLES[kind]
        self._check_unique(table, "nickname", nickname, _MEMBER_NAMES[kind], exclude_id=member_id)
        return self._update(table, member_id, nickname=nickname, email=email, level=level, experience=experience)

    async def delete_member(self, kind: str, member_id: int) -> bool:
        if self.tables[_MEMBER_TABLES[kind]].pop(member_id, None) is None:
            return False
        column = _MEMBER_COLUMNS[kind]
        for user in self.tables["app_users"].values():
            if user[column] == member_id:
                user[column] = None
        if kind == "player":
            self.player_games = {(p, g) for (p, g) in self.player_games if p != member_id}
            self.player_achievements = {(p, a) for (p, a) in self.player_achievements if p != member_id}
            self.player_items = {(p, i) for (p, i) in self.player_items if p != member_id}
        return True

    async def player_owns_game(self, player_id: int, game_id: int) -> bool:
        return (player_id, game_id) in self.player_games

    async def add_player_game(self, player_id: int, game_id: int) -> None:
        self.player_games.add((player_id, game_id))

    async def add_player_achievement(self, player_id: int, achievement_id: int) -> None:
        self.player_achievements.add((player_id, achievement_id))

    async def add_player_item(self, player_id: int, item_id: int) -> None:
        self.player_items.add((player_id, item_id))

    # -- credentials -----------------------------------------------------

    async def create_user(self, *, username, password_hash, role, player_id=None, admin_id=None) -> dict:
        self._check_unique("app_users", "username", username, "User")
        return self._insert(
            "app_users",
            username=username,
            password_hash=password_hash,
            role=role,
            player_id=player_id,
            admin_id=admin_id,
        )

    async def get_user_by_username(self, username: str) -> dict | None:
        return self._find("app_users", username=username)

    async def get_user_by_id(self, user_id: int) -> dict | None:
        return self._get("app_users", user_id)

    async def get_user_for_member(self, kind: str, member_id: int) -> dict | None:
        return self._find("app_users", **{_MEMBER_COLUMNS[kind]: member_id})

    async def detach_user(self, user_id: int) -> None:
        self._update("app_users", user_id, player_id=None, admin_id=None)

    async def delete_user(self, user_id: int) -> bool:
        return self.tables["app_users"].pop(user_id, None) is not None

    # -- wiring ----------------------------------------------------------

    def install(self, monkeypatch: pytest.MonkeyPatch) -> None:
        modules = {
            game_repository: (
                "list_games",
                "get_game",
                "get_game_by_title",
                "list_games_for_player",
                "insert_game",
                "update_game",
                "delete_game",
            ),
            achievement_repository: (
                "list_achievements",
                "get_achievement",
                "list_achievements_for_game",
                "list_achievements_for_player",
                "insert_achievement",
                "update_achievement",
                "delete_achievement",
            ),
            item_repository: (
                "list_items",
                "get_item",
                "list_items_for_game",
                "list_items_for_player",
                "insert_item",
                "update_item",
                "delete_item",
            ),
            player_repository: (
                "list_members",
                "get_member",
                "get_member_by_nickname",
                "insert_member",
                "update_member",
                "delete_member",
                "player_owns_game",
                "add_player_game",
                "add_player_achievement",
                "add_player_item",
            ),
            auth_repository: (
                "create_user",
                "get_user_by_username",
                "get_user_by_id",
                "get_user_for_member",
                "detach_user",
                "delete_user",
            ),
        }
        for module, names in modules.items():
            for name in names:
                monkeypatch.setattr(module, name, getattr(self, name))

    def seed_member(self, kind: str, nickname: str, password: str = "secret-pass") -> dict:
        """Insert a player/admin and its credential; return the credential row."""
        member = self._insert(_MEMBER_TABLES[kind], nickname=nickname, email=None, level=1, experience=0)
        return self._insert(
            "app_users",
            username=nickname,
            password_hash=security.hash_password(password),
            role=kind.upper(),
            player_id=member["id"] if kind == "player" else None,
            admin_id=member["id"] if kind == "admin" else None,
        )


def bearer(user_row: dict) -> dict[str, str]:
    token = security.build_access_token(
        user_id=user_row["id"],
        username=user_row["username"],
        role=user_row["role"],
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def _test_env(monkeypatch):
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    monkeypatch.setenv("JWT_SECRET", "test-secret-that-is-long-enough-for-hs256")
    monkeypatch.delenv("DEFAULT_MEMBER_PASSWORD", raising=False)
    monkeypatch.delenv("BOOTSTRAP_ADMIN_USERNAME", raising=False)
    monkeypatch.delenv("BOOTSTRAP_ADMIN_PASSWORD", raising=False)


@pytest.fixture
def store(monkeypatch) -> InMemoryStore:
    fake = InMemoryStore()
    fake.install(monkeypatch)
    return fake


@pytest.fixture
def admin_headers(store) -> dict[str, str]:
    return bearer(store.seed_member("admin", "root"))


@pytest.fixture
def player_headers(store) -> dict[str, str]:
    return bearer(store.seed_member("player", "scout"))


@pytest_asyncio.fixture
async def client(store):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        yield http
