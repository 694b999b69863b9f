"""Tests for the static access policy."""

from __future__ import annotations

import pytest

from auth import policy
from auth.schemas import Role
from core import links


def test_every_route_has_an_access_rule():
    assert set(links.ROUTES) == set(policy.POLICY)


@pytest.mark.parametrize(
    "controller, action",
    [
        ("games", "list"),
        ("games", "create"),
        ("achievements", "delete"),
        ("items", "update"),
        ("admins", "create_player"),
        ("admins", "delete"),
    ],
)
def test_admin_only_actions(controller, action):
    assert policy.is_allowed(Role.ADMIN, controller, action)
    assert not policy.is_allowed(Role.PLAYER, controller, action)


@pytest.mark.parametrize("action", ["achievements_by_name", "items_by_name"])
def test_lookup_by_game_name_is_shared(action):
    assert policy.is_allowed("ADMIN", "games", action)
    assert policy.is_allowed("PLAYER", "games", action)


def test_open_routes_allow_anonymous_callers():
    assert policy.is_allowed(None, "players", "register")
    assert policy.is_allowed(None, "auth", "login")


def test_self_service_is_for_players():
    assert policy.is_allowed(Role.PLAYER, "players", "me")
    assert not policy.is_allowed(Role.ADMIN, "players", "me")


def test_unknown_role_is_denied():
    assert not policy.is_allowed("SUPERUSER", "games", "list")
    assert not policy.is_allowed(None, "games", "list")


def test_guard_rejects_unknown_action():
    with pytest.raises(KeyError):
        policy.guard("games", "archive")
