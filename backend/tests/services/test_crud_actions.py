"""CRUD Actions — the five action templates over HTTP.

Tests cover:
    - create: 201 + presenter body / 400 + error sentence / unknown attribute / duplicate
    - show: full view by default, `type` override, 404
    - index: default list view, filters, sort, limit, `type` override
    - update: 200 / 400 with "Name can't be blank" / 404
    - destroy: destroyed / blocked by dependent orders / 404
    - repeated show/index return byte-identical bodies
"""

import pytest

USER_FULL_KEYS = {"id", "name", "email", "active", "created_at"}
USER_SUMMARY_KEYS = {"id", "name"}


# ─── create ──────────────────────────────────────────────────────

async def test_create_returns_201_with_persisted_id(client):
    res = await client.post(
        "/api/v1/users", json={"name": "Grace", "email": "grace@example.com"},
    )
    assert res.status_code == 201
    body = res.json()
    assert isinstance(body["id"], int)
    assert body["name"] == "Grace"


async def test_create_uses_presenter_default_view(client):
    res = await client.post(
        "/api/v1/users", json={"name": "Grace", "email": "grace@example.com"},
    )
    assert set(res.json()) == USER_SUMMARY_KEYS


async def test_create_invalid_returns_400_with_all_messages(client):
    res = await client.post("/api/v1/users", json={"name": "", "email": "nope"})
    assert res.status_code == 400
    assert res.json() == {"error": "Name can't be blank and Email is invalid"}


async def test_create_with_missing_fields_lists_every_violation(client):
    res = await client.post("/api/v1/orders", json={"total_cents": -5})
    assert res.status_code == 400
    assert res.json()["error"] == (
        "User must exist, Reference can't be blank, "
        "and Total cents must be greater than or equal to 0"
    )


async def test_create_rejects_unknown_attribute(client):
    res = await client.post(
        "/api/v1/users",
        json={"name": "Grace", "email": "g@example.com", "nickname": "amazing"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "unknown attribute 'nickname' for User."}


async def test_create_duplicate_email_is_statement_error(client, seed_user):
    res = await client.post(
        "/api/v1/users", json={"name": "Other", "email": seed_user.email},
    )
    assert res.status_code == 400
    assert "UNIQUE" in res.json()["error"]


async def test_create_ignores_routing_keys(client):
    res = await client.post(
        "/api/v1/users?format=json&controller=x",
        json={"name": "Grace", "email": "grace@example.com", "action": "create"},
    )
    assert res.status_code == 201


async def test_create_then_show_present_identically(client):
    created = await client.post(
        "/api/v1/users?type=full",
        json={"name": "Grace", "email": "grace@example.com"},
    )
    shown = await client.get(f"/api/v1/users/{created.json()['id']}")
    assert created.json() == shown.json()


# ─── show ────────────────────────────────────────────────────────

async def test_show_defaults_to_full_view(client, seed_user):
    res = await client.get(f"/api/v1/users/{seed_user.id}")
    assert res.status_code == 200
    body = res.json()
    assert set(body) == USER_FULL_KEYS
    assert body["email"] == "ada@example.com"
    assert body["active"] is True


async def test_show_with_type_returns_named_view(client, seed_user):
    res = await client.get(f"/api/v1/users/{seed_user.id}?type=summary")
    assert res.json() == {"id": seed_user.id, "name": "Ada Lovelace"}


async def test_show_unknown_view_is_400(client, seed_user):
    res = await client.get(f"/api/v1/users/{seed_user.id}?type=compact")
    assert res.status_code == 400
    assert "Unknown view 'compact'" in res.json()["error"]


async def test_show_missing_record_is_404(client):
    res = await client.get("/api/v1/users/999")
    assert res.status_code == 404
    assert res.json() == {"error": "Couldn't find User with 'id'=999"}


async def test_show_non_numeric_id_is_404(client):
    res = await client.get("/api/v1/users/abc")
    assert res.status_code == 404


async def test_show_is_idempotent(client, seed_user):
    first = await client.get(f"/api/v1/users/{seed_user.id}")
    second = await client.get(f"/api/v1/users/{seed_user.id}")
    assert first.content == second.content


# ─── index ───────────────────────────────────────────────────────

@pytest.fixture
async def three_users(client):
    for name, email in [
        ("Carol", "carol@example.com"),
        ("Alice", "alice@example.com"),
        ("Bob", "bob@example.com"),
    ]:
        res = await client.post("/api/v1/users", json={"name": name, "email": email})
        assert res.status_code == 201


async def test_index_uses_default_list_view(client, three_users):
    res = await client.get("/api/v1/users")
    assert res.status_code == 200
    body = res.json()
    assert [u["name"] for u in body] == ["Carol", "Alice", "Bob"]
    assert all(set(u) == USER_SUMMARY_KEYS for u in body)


async def test_index_with_type_uses_named_view(client, three_users):
    res = await client.get("/api/v1/users?type=full")
    assert all(set(u) == USER_FULL_KEYS for u in res.json())


async def test_index_filters_by_params(client, three_users):
    res = await client.get("/api/v1/users?name=Bob")
    assert [u["name"] for u in res.json()] == ["Bob"]


async def test_index_sorts_and_limits(client, three_users):
    res = await client.get("/api/v1/users?sort=name&limit=2")
    assert [u["name"] for u in res.json()] == ["Alice", "Bob"]


async def test_index_sort_descending(client, three_users):
    res = await client.get("/api/v1/users?sort=-name")
    assert [u["name"] for u in res.json()] == ["Carol", "Bob", "Alice"]


async def test_index_bad_sort_column_is_400(client, three_users):
    res = await client.get("/api/v1/users?sort=password")
    assert res.status_code == 400


async def test_index_empty_collection(client):
    res = await client.get("/api/v1/orders")
    assert res.status_code == 200
    assert res.json() == []


async def test_index_is_idempotent(client, three_users):
    first = await client.get("/api/v1/users?sort=name")
    second = await client.get("/api/v1/users?sort=name")
    assert first.content == second.content


# ─── update ──────────────────────────────────────────────────────

async def test_update_returns_200(client, seed_user):
    res = await client.patch(
        f"/api/v1/users/{seed_user.id}", json={"name": "Ada King"},
    )
    assert res.status_code == 200
    assert res.json()["name"] == "Ada King"


async def test_update_blank_name_is_400(client, seed_user):
    res = await client.patch(f"/api/v1/users/{seed_user.id}", json={"name": ""})
    assert res.status_code == 400
    assert res.json() == {"error": "Name can't be blank"}


async def test_failed_update_is_not_persisted(client, seed_user):
    await client.put(f"/api/v1/users/{seed_user.id}", json={"name": ""})
    res = await client.get(f"/api/v1/users/{seed_user.id}")
    assert res.json()["name"] == "Ada Lovelace"


async def test_update_missing_record_is_404(client):
    res = await client.patch("/api/v1/users/7", json={"name": "x"})
    assert res.status_code == 404
    assert res.json() == {"error": "Couldn't find User with 'id'=7"}


# ─── destroy ─────────────────────────────────────────────────────

async def test_destroy_returns_destroyed_message(client, seed_user):
    res = await client.delete(f"/api/v1/users/{seed_user.id}")
    assert res.status_code == 200
    assert res.json() == {"message": "destroyed"}

    res = await client.get(f"/api/v1/users/{seed_user.id}")
    assert res.status_code == 404


async def test_destroy_blocked_by_dependents_is_400(client, seed_user, seed_order):
    res = await client.delete(f"/api/v1/users/{seed_user.id}")
    assert res.status_code == 400
    assert res.json() == {
        "error": "Cannot delete record because dependent orders exist",
    }


async def test_destroy_missing_record_is_404(client):
    res = await client.delete("/api/v1/orders/42")
    assert res.status_code == 404


# ─── routing / transport ────────────────────────────────────────

async def test_unknown_resource_is_404(client):
    res = await client.get("/api/v1/widgets")
    assert res.status_code == 404
    assert res.json() == {"error": "Unknown resource 'widgets'"}


async def test_malformed_json_body_is_400(client):
    res = await client.post(
        "/api/v1/users", content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Request body is not valid JSON"}


async def test_non_object_json_body_is_400(client):
    res = await client.post("/api/v1/users", json=["a", "b"])
    assert res.status_code == 400
    assert res.json() == {"error": "Request body must be a JSON object"}
