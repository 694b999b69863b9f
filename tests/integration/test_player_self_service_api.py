"""API tests for player registration and self-service routes."""

from __future__ import annotations

import pytest


def _rels(body: dict) -> dict[str, str]:
    return {link["rel"]: link["href"] for link in body["links"]}


async def _register_and_login(client, nickname: str = "ace", password: str = "hunter2-hunter2") -> dict:
    response = await client.post("/players/register", json={"nickname": nickname, "password": password})
    assert response.status_code == 200, response.text
    login = await client.post("/auth/login", json={"username": nickname, "password": password})
    assert login.status_code == 200
    return {"Authorization": f"Bearer {login.json()['access_token']}"}


@pytest.fixture
def catalog(store) -> dict:
    portal = store._insert("games", title="Portal", genre="Puzzle", description=None)
    braid = store._insert("games", title="Braid", genre="Puzzle", description=None)
    return {
        "portal": portal,
        "braid": braid,
        "cake": store._insert("achievements", name="Cake", description=None, game_id=portal["id"]),
        "gun": store._insert("items", name="Gun", description=None, attributes={}, game_id=portal["id"]),
        "key": store._insert("items", name="Key", description=None, attributes={}, game_id=braid["id"]),
    }


@pytest.mark.asyncio
async def test_registration_is_open(client, store):
    response = await client.post(
        "/players/register",
        json={"nickname": "ace", "email": "ace@example.com", "password": "hunter2-hunter2"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["nickname"] == "ace"
    assert body["level"] == 1
    assert _rels(body)["self"] == "/players/me"
    assert (await store.get_user_by_username("ace"))["role"] == "PLAYER"


@pytest.mark.asyncio
async def test_registration_rejects_short_password(client, store):
    response = await client.post("/players/register", json={"nickname": "ace", "password": "short"})

    assert response.status_code == 400
    assert store.tables["players"] == {}


@pytest.mark.asyncio
async def test_me_returns_own_profile(client):
    headers = await _register_and_login(client)

    response = await client.get("/players/me", headers=headers)

    assert response.status_code == 200
    assert response.json()["nickname"] == "ace"


@pytest.mark.asyncio
async def test_admin_has_no_player_profile(client, admin_headers):
    response = await client.get("/players/me", headers=admin_headers)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_acquire_collect_unlock(client, catalog):
    headers = await _register_and_login(client)
    portal = catalog["portal"]

    response = await client.post(f"/players/me/games/{portal['id']}", headers=headers)
    assert response.status_code == 200
    assert [g["title"] for g in response.json()["items"]] == ["Portal"]
    assert _rels(response.json()) == {"self": "/players/me/games"}

    response = await client.post(f"/players/me/achievements/{catalog['cake']['id']}", headers=headers)
    assert [a["name"] for a in response.json()["items"]] == ["Cake"]

    response = await client.post(f"/players/me/items/{catalog['gun']['id']}", headers=headers)
    assert [i["name"] for i in response.json()["items"]] == ["Gun"]

    games = (await client.get("/players/me/games", headers=headers)).json()
    assert len(games["items"]) == 1


@pytest.mark.asyncio
async def test_acquiring_twice_is_idempotent(client, catalog):
    headers = await _register_and_login(client)
    url = f"/players/me/games/{catalog['portal']['id']}"

    await client.post(url, headers=headers)
    response = await client.post(url, headers=headers)

    assert len(response.json()["items"]) == 1


@pytest.mark.asyncio
async def test_collecting_item_of_unowned_game_is_conflict(client, catalog, store):
    headers = await _register_and_login(client)
    await client.post(f"/players/me/games/{catalog['portal']['id']}", headers=headers)

    response = await client.post(f"/players/me/items/{catalog['key']['id']}", headers=headers)

    assert response.status_code == 409
    assert store.player_items == set()


@pytest.mark.asyncio
async def test_unlocking_unknown_achievement_is_not_found(client, catalog):
    headers = await _register_and_login(client)

    response = await client.post("/players/me/achievements/999", headers=headers)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_acquiring_unknown_game_is_not_found(client):
    headers = await _register_and_login(client)

    response = await client.post("/players/me/games/31", headers=headers)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_unlocking_achievement_of_unowned_game_is_conflict(client, catalog, store):
    headers = await _register_and_login(client)
    await client.post(f"/players/me/games/{catalog['braid']['id']}", headers=headers)

    response = await client.post(f"/players/me/achievements/{catalog['cake']['id']}", headers=headers)

    assert response.status_code == 409
    assert store.player_achievements == set()
