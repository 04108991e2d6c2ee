import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from inventory.main import app
from inventory.config import settings
from inventory.database import Base, get_db
from inventory.models.user import User, UserRole
from inventory.routers import auth as auth_router
from inventory.security import hash_password, create_access_token

TEST_DB_URL = "sqlite:///:memory:"

PASSWORD = "secret123"


@pytest.fixture(scope="function")
def session_factory():
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,  # Ensure all connections share same in-memory DB
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine)
    Base.metadata.drop_all(engine)


@pytest.fixture(scope="function")
def tokens(session_factory):
    """One account per role; maps role name -> bearer token."""
    db = session_factory()
    result = {}
    for username, role in (("admin", UserRole.admin), ("operator", UserRole.operator), ("manager", UserRole.management)):
        user = User(username=username, hashed_password=hash_password(PASSWORD), role=role)
        db.add(user)
        db.commit()
        db.refresh(user)
        result[role.value] = create_access_token(user)
    db.close()
    return result


@pytest.fixture
def as_role(tokens):
    def _headers(role: str) -> dict:
        return {"Authorization": f"Bearer {tokens[role]}"}
    return _headers


@pytest.fixture(scope="function")
def client(session_factory, tokens, tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(tmp_path / "uploads"))

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    auth_router._login_attempts.clear()

    with TestClient(app) as c:
        # Admin by default; pass headers=as_role(...) to act as someone else
        c.headers["Authorization"] = f"Bearer {tokens['Admin']}"
        yield c

    app.dependency_overrides.clear()
    auth_router._login_attempts.clear()


@pytest.fixture
def category(client):
    return client.post("/api/categories", json={"category_name": "Laptop"}).json()


@pytest.fixture
def make_item(client, category):
    counter = {"n": 0}

    def _make(category_id: int | None = None, **fields) -> dict:
        counter["n"] += 1
        payload = {
            "category_id": category_id or category["id"],
            "serial_number": f"SN-{counter['n']:04d}",
            "brand": "Dell",
            "model": "Latitude 5440",
        }
        payload.update(fields)
        res = client.post("/api/items", json=payload)
        assert res.status_code == 201, res.text
        return res.json()
    return _make


@pytest.fixture
def employee(client):
    res = client.post(
        "/api/employees",
        json={"employee_name": "Jane Doe", "department_id": "IT", "designation_id": "Engineer"},
    )
    return res.json()
