"""Tests for entry CRUD routes."""


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    data = res.json()
    assert data["status"] == "ok"
    assert "timestamp" in data


def test_create_entry(client):
    res = client.post(
        "/api/entries",
        json={
            "type": "decision",
            "title": "Use JWT",
            "content": "We chose JWT for stateless auth",
            "tags": ["auth", "jwt"],
            "sourcePath": "docs/adr/001.md",
            "metadata": {"owner": "platform"},
        },
    )
    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    entry = body["data"]
    assert entry["id"]
    assert entry["type"] == "decision"
    assert entry["source"] == "api"
    assert entry["sourcePath"] == "docs/adr/001.md"
    assert entry["tags"] == ["auth", "jwt"]
    assert entry["metadata"] == {"owner": "platform"}
    assert entry["createdAt"] == entry["updatedAt"]
    assert "error" not in body
    assert "pagination" not in body


def test_get_round_trips_created_entry(client, create_entry):
    created = create_entry(title="Service layout", tags=["infra"], source="web")
    res = client.get(f"/api/entries/{created['id']}")
    assert res.status_code == 200
    assert res.json() == {"success": True, "data": created}


def test_create_missing_fields(client):
    res = client.post("/api/entries", json={"type": "code", "title": "No content"})
    assert res.status_code == 400
    assert res.json() == {"success": False, "error": "type, title, and content are required"}


def test_create_empty_title_rejected(client):
    res = client.post("/api/entries", json={"type": "code", "title": "", "content": "c"})
    assert res.status_code == 400


def test_create_invalid_type(client):
    res = client.post("/api/entries", json={"type": "meeting", "title": "t", "content": "c"})
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert "type" in body["error"]


def test_create_malformed_json(client):
    res = client.post(
        "/api/entries", content="{not json", headers={"Content-Type": "application/json"}
    )
    assert res.status_code == 400
    assert res.json()["success"] is False


def test_get_missing(client):
    res = client.get("/api/entries/does-not-exist")
    assert res.status_code == 404
    assert res.json() == {"success": False, "error": "Entry not found"}


def test_update_merges(client, create_entry):
    created = create_entry(
        type="decision", title="Use JWT", content="stateless auth", tags=["auth"]
    )
    res = client.put(f"/api/entries/{created['id']}", json={"title": "Use JWT v2"})
    assert res.status_code == 200
    updated = res.json()["data"]
    assert updated["title"] == "Use JWT v2"
    assert updated["content"] == "stateless auth"
    assert updated["type"] == "decision"
    assert updated["tags"] == ["auth"]
    assert updated["createdAt"] == created["createdAt"]
    assert updated["updatedAt"] >= created["updatedAt"]


def test_update_null_does_not_erase(client, create_entry):
    created = create_entry(content="keep me")
    res = client.put(f"/api/entries/{created['id']}", json={"content": None, "title": ""})
    assert res.status_code == 200
    assert res.json()["data"]["content"] == "keep me"
    assert res.json()["data"]["title"] == created["title"]


def test_update_missing(client):
    res = client.put("/api/entries/nope", json={"title": "x"})
    assert res.status_code == 404
    assert res.json()["success"] is False


def test_delete(client, create_entry):
    created = create_entry()
    res = client.delete(f"/api/entries/{created['id']}")
    assert res.status_code == 200
    assert res.json() == {"success": True}

    assert client.get(f"/api/entries/{created['id']}").status_code == 404
    second = client.delete(f"/api/entries/{created['id']}")
    assert second.status_code == 404
    assert second.json() == {"success": False, "error": "Entry not found"}


def test_list_entries_default_limit(client, create_entry):
    for i in range(55):
        create_entry(title=f"Entry {i}")
    res = client.get("/api/entries")
    body = res.json()
    assert len(body["data"]) == 50
    assert body["pagination"] == {"total": 55, "limit": 50, "offset": 0}


def test_list_entries_filters(client, create_entry):
    create_entry(type="process", tags=["ops"])
    create_entry(type="process", tags=["dev"])
    create_entry(type="code", tags=["ops"])
    res = client.get("/api/entries", params={"type": "process", "tags": "ops, dev"})
    body = res.json()
    assert body["pagination"]["total"] == 2
    assert {e["type"] for e in body["data"]} == {"process"}


def test_list_entries_insertion_order(client, create_entry):
    ids = [create_entry(title=f"E{i}")["id"] for i in range(3)]
    res = client.get("/api/entries")
    assert [e["id"] for e in res.json()["data"]] == ids


def test_unknown_route_uses_envelope(client):
    res = client.get("/api/nothing-here")
    assert res.status_code == 404
    assert res.json()["success"] is False
