"""Route-level role checks and the service endpoints."""


def test_root_welcome(client):
    res = client.get("/")
    assert res.status_code == 200
    assert "message" in res.json()


def test_health(client):
    res = client.get("/api/health")
    assert res.json() == {"status": "ok"}
    assert res.headers["x-content-type-options"] == "nosniff"
    assert res.headers["x-frame-options"] == "DENY"


def test_management_cannot_create_items(client, category, as_role):
    res = client.post(
        "/api/items",
        json={"category_id": category["id"], "serial_number": "M-1", "brand": "B", "model": "M"},
        headers=as_role("Management"),
    )
    assert res.status_code == 403
    assert res.json()["detail"] == "Insufficient permissions"


def test_operator_can_create_but_not_delete_items(client, category, as_role):
    res = client.post(
        "/api/items",
        json={"category_id": category["id"], "serial_number": "O-1", "brand": "B", "model": "M"},
        headers=as_role("Operator"),
    )
    assert res.status_code == 201
    assert client.delete(f"/api/items/{res.json()['id']}", headers=as_role("Operator")).status_code == 403
    assert client.delete(f"/api/items/{res.json()['id']}").status_code == 200


def test_management_can_read_items(client, make_item, as_role):
    make_item()
    res = client.get("/api/items", headers=as_role("Management"))
    assert res.status_code == 200
    assert len(res.json()) == 1
