"""API tests for /api/items."""


def test_create_item(client, category):
    res = client.post("/api/items", json={
        "category_id": category["id"],
        "serial_number": "SN-A1",
        "brand": "Dell",
        "model": "Latitude 7420",
        "specifications": "16GB RAM, 512GB SSD",
        "date_of_purchase": "2023-05-01",
    })
    assert res.status_code == 201
    data = res.json()
    assert data["serial_number"] == "SN-A1"
    assert data["status"] == "In Stock"
    assert data["category_name"] == "Laptop"
    assert data["date_of_purchase"] == "2023-05-01"
    assert "id" in data


def test_create_item_missing_fields(client, category):
    res = client.post("/api/items", json={"category_id": category["id"], "brand": "Dell"})
    assert res.status_code == 422


def test_create_item_unknown_category(client):
    res = client.post("/api/items", json={"category_id": 999, "serial_number": "X", "brand": "B", "model": "M"})
    assert res.status_code == 404


def test_duplicate_serial(client, make_item):
    make_item(serial_number="DUP-001")
    res = client.post("/api/items", json={
        "category_id": 1, "serial_number": "DUP-001", "brand": "HP", "model": "EliteBook",
    })
    assert res.status_code == 409


def test_list_and_filter_items(client, make_item):
    monitors = client.post("/api/categories", json={"category_name": "Monitor"}).json()
    make_item(brand="Dell", model="Latitude")
    make_item(brand="HP", model="ProBook")
    make_item(category_id=monitors["id"], brand="Dell", model="U2720Q", status="Out of Stock")

    assert len(client.get("/api/items").json()) == 3
    assert len(client.get("/api/items", params={"brand": "Dell"}).json()) == 2
    assert len(client.get("/api/items", params={"category": monitors["id"]}).json()) == 1
    assert len(client.get("/api/items", params={"status": "Out of Stock"}).json()) == 1

    found = client.get("/api/items", params={"search": "probook"}).json()
    assert [i["model"] for i in found] == ["ProBook"]


def test_search_matches_serial(client, make_item):
    make_item(serial_number="ZX-9001")
    make_item()
    found = client.get("/api/items", params={"search": "ZX-90"}).json()
    assert len(found) == 1


def test_search_is_not_injectable(client, make_item):
    make_item()
    res = client.get("/api/items", params={"search": "' OR 1=1 --"})
    assert res.status_code == 200
    assert res.json() == []


def test_available_peripherals(client, make_item, employee):
    mice = client.post("/api/categories", json={"category_name": "Mouse"}).json()
    free_mouse = make_item(category_id=mice["id"], brand="Logitech", model="M185")
    lent_mouse = make_item(category_id=mice["id"], brand="Logitech", model="M720")
    make_item()  # a laptop is not a peripheral

    client.post("/api/issuance/issue", json={
        "item_id": lent_mouse["id"], "employee_id": employee["id"], "issue_date": "2024-02-01",
    })

    res = client.get("/api/items/peripherals")
    assert res.status_code == 200
    assert [i["id"] for i in res.json()] == [free_mouse["id"]]


def test_get_item(client, make_item):
    item = make_item()
    res = client.get(f"/api/items/{item['id']}")
    assert res.status_code == 200
    assert res.json()["id"] == item["id"]


def test_get_item_not_found(client):
    res = client.get("/api/items/99999")
    assert res.status_code == 404


def test_update_item(client, make_item):
    item = make_item()
    res = client.put(f"/api/items/{item['id']}", json={"model": "Latitude 9440", "status": "Out of Stock"})
    assert res.status_code == 200
    data = res.json()
    assert data["model"] == "Latitude 9440"
    assert data["status"] == "Out of Stock"
    assert data["brand"] == "Dell"


def test_update_item_duplicate_serial(client, make_item):
    make_item(serial_number="TAKEN")
    item = make_item()
    res = client.put(f"/api/items/{item['id']}", json={"serial_number": "TAKEN"})
    assert res.status_code == 409


def test_update_item_keeps_own_serial(client, make_item):
    item = make_item(serial_number="MINE")
    res = client.put(f"/api/items/{item['id']}", json={"serial_number": "MINE", "vendor": "Acme"})
    assert res.status_code == 200
    assert res.json()["vendor"] == "Acme"


def test_delete_item(client, make_item):
    item = make_item()
    res = client.delete(f"/api/items/{item['id']}")
    assert res.status_code == 200
    assert res.json() == {"message": "Item deleted successfully"}
    assert client.get(f"/api/items/{item['id']}").status_code == 404


def test_delete_item_not_found(client):
    assert client.delete("/api/items/424242").status_code == 404


def test_delete_item_with_issuance_history(client, make_item, employee):
    item = make_item()
    log = client.post("/api/issuance/issue", json={
        "item_id": item["id"], "employee_id": employee["id"], "issue_date": "2024-03-01",
    }).json()
    client.post("/api/issuance/receive", json={"log_id": log["id"], "return_date": "2024-03-05"})

    res = client.delete(f"/api/items/{item['id']}")
    assert res.status_code == 400
    detail = res.json()["detail"]
    assert detail["issuance_count"] == 1
    assert "issuance history" in detail["message"]
    assert client.get(f"/api/items/{item['id']}").status_code == 200


def test_delete_item_with_documents(client, make_item):
    item = make_item()
    client.post(
        f"/api/documents/items/{item['id']}/documents",
        files=[("documents", ("invoice.pdf", b"%PDF-1.4 invoice", "application/pdf"))],
    )
    res = client.delete(f"/api/items/{item['id']}")
    assert res.status_code == 400
    assert res.json()["detail"]["document_count"] == 1


def test_delete_item_in_composite(client, make_item):
    desktop = make_item(model="OptiPlex")
    keyboard = make_item(model="KB216")
    client.post("/api/composite-items", json={"desktop_id": desktop["id"], "keyboard_id": keyboard["id"]})

    res = client.delete(f"/api/items/{keyboard['id']}")
    assert res.status_code == 400
    assert res.json()["detail"]["composite_count"] == 1


def test_delete_item_removes_stock_rows(client, make_item):
    item = make_item()
    client.post("/api/stock", json={"item_id": item["id"], "quantity_in_stock": 4})
    assert client.delete(f"/api/items/{item['id']}").status_code == 200
    assert client.get("/api/stock").json() == []


def test_item_changes_are_audited(client, make_item):
    item = make_item(serial_number="AUD-1")
    client.delete(f"/api/items/{item['id']}")
    actions = [a["action_performed"] for a in client.get("/api/audit-logs").json()]
    assert "Created item AUD-1" in actions
    assert "Deleted item AUD-1" in actions
