"""API tests for employees, departments and designations."""


def _employee(client, name="Jane Doe", department="IT", designation="Engineer"):
    return client.post("/api/employees", json={
        "employee_name": name, "department_id": department, "designation_id": designation,
    })


def test_create_employee(client):
    res = _employee(client)
    assert res.status_code == 201
    data = res.json()
    assert data["employee_name"] == "Jane Doe"
    assert data["department_id"] == "IT"


def test_create_employee_requires_department(client):
    res = client.post("/api/employees", json={"employee_name": "No Dept", "designation_id": "Clerk"})
    assert res.status_code == 422


def test_numeric_department_is_stored_as_text(client):
    res = client.post("/api/employees", json={"employee_name": "Num", "department_id": 3, "designation_id": 7})
    assert res.status_code == 201
    assert res.json()["department_id"] == "3"
    assert res.json()["designation_id"] == "7"


def test_update_employee(client):
    emp = _employee(client).json()
    res = client.put(f"/api/employees/{emp['id']}", json={
        "employee_name": "Jane Smith", "department_id": "HR", "designation_id": "Lead",
    })
    assert res.status_code == 200
    assert res.json()["employee_name"] == "Jane Smith"
    assert res.json()["department_id"] == "HR"


def test_get_employee_not_found(client):
    assert client.get("/api/employees/99").status_code == 404


def test_unique_departments_and_designations(client):
    _employee(client, "A", "IT", "Engineer")
    _employee(client, "B", "HR", "Engineer")
    _employee(client, "C", "IT", "Manager")

    departments = client.get("/api/employees/unique/departments").json()
    assert departments == [{"department": "HR"}, {"department": "IT"}]
    designations = client.get("/api/employees/unique/designations").json()
    assert designations == [{"designation": "Engineer"}, {"designation": "Manager"}]


def test_delete_employee(client):
    emp = _employee(client).json()
    assert client.delete(f"/api/employees/{emp['id']}").status_code == 200
    assert client.get(f"/api/employees/{emp['id']}").status_code == 404


def test_delete_employee_with_issuance_history(client, make_item):
    emp = _employee(client).json()
    item = make_item()
    client.post("/api/issuance/issue", json={"item_id": item["id"], "employee_id": emp["id"], "issue_date": "2024-01-02"})
    res = client.delete(f"/api/employees/{emp['id']}")
    assert res.status_code == 400
    assert res.json()["detail"]["issuance_count"] == 1


def test_management_reads_but_cannot_write_employees(client, as_role):
    _employee(client)
    assert client.get("/api/employees", headers=as_role("Management")).status_code == 200
    assert _employee_as(client, as_role("Management")).status_code == 403


def _employee_as(client, headers):
    return client.post(
        "/api/employees",
        json={"employee_name": "X", "department_id": "IT", "designation_id": "Y"},
        headers=headers,
    )


# ─── Departments / designations ──────────────────────────────────────────────

def test_department_crud(client):
    created = client.post("/api/departments", json={"department_name": "Finance"})
    assert created.status_code == 201
    dept_id = created.json()["id"]

    assert client.post("/api/departments", json={"department_name": "Finance"}).status_code == 409

    res = client.put(f"/api/departments/{dept_id}", json={"department_name": "Accounting"})
    assert res.json()["department_name"] == "Accounting"
    assert [d["department_name"] for d in client.get("/api/departments").json()] == ["Accounting"]

    assert client.delete(f"/api/departments/{dept_id}").status_code == 200
    assert client.get(f"/api/departments/{dept_id}").status_code == 404


def test_designation_crud(client):
    created = client.post("/api/designations", json={"designation_title": "Engineer"})
    assert created.status_code == 201
    des_id = created.json()["id"]

    assert client.post("/api/designations", json={"designation_title": "Engineer"}).status_code == 409
    other = client.post("/api/designations", json={"designation_title": "Manager"}).json()
    assert client.put(f"/api/designations/{other['id']}", json={"designation_title": "Engineer"}).status_code == 409

    assert client.delete(f"/api/designations/{des_id}").status_code == 200
    assert client.delete(f"/api/designations/{des_id}").status_code == 404


def test_registry_is_closed_to_management(client, as_role):
    assert client.get("/api/departments", headers=as_role("Management")).status_code == 403
    assert client.get("/api/designations", headers=as_role("Operator")).status_code == 200
