"""Issuance service transactions against a bare session."""
from datetime import date

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from inventory.models.category import Category
from inventory.models.employee import Employee
from inventory.models.issuance import IssuanceLog
from inventory.models.item import Item, ItemStatus
from inventory.models.user import User, UserRole
from inventory.permissions import Permission, ROLE_PERMISSIONS
from inventory.schemas.issuance import IssueRequest, IssuePeripheralsRequest
import inventory.services.issuance_service as svc


@pytest.fixture
def stocked(db):
    category = Category(category_name="Mouse")
    db.add(category)
    db.flush()
    items = [Item(category_id=category.id, serial_number=f"M-{i}", brand="Logitech", model="M100") for i in range(3)]
    employee = Employee(employee_name="Dana", department_id="Ops", designation_id="Tech")
    db.add_all(items + [employee])
    db.commit()
    return items, employee


def _failing_commit():
    raise OperationalError("COMMIT", {}, Exception("disk I/O error"))


def test_failed_commit_rolls_back_bulk_issue(db, stocked, monkeypatch):
    items, employee = stocked
    monkeypatch.setattr(db, "commit", _failing_commit)

    with pytest.raises(OperationalError):
        svc.issue_peripherals(db, IssuePeripheralsRequest(
            item_ids=[i.id for i in items], employee_id=employee.id, issue_date=date(2024, 1, 15),
        ))

    assert db.scalars(select(IssuanceLog)).all() == []
    assert all(db.get(Item, i.id).status == ItemStatus.in_stock for i in items)


def test_failed_commit_rolls_back_single_issue(db, stocked, monkeypatch):
    items, employee = stocked
    monkeypatch.setattr(db, "commit", _failing_commit)

    with pytest.raises(OperationalError):
        svc.issue_item(db, IssueRequest(item_id=items[0].id, employee_id=employee.id, issue_date=date(2024, 1, 15)))

    assert db.get(Item, items[0].id).status == ItemStatus.in_stock
    assert db.scalars(select(IssuanceLog)).all() == []


def test_issue_records_issuer(db, stocked):
    items, employee = stocked
    log = svc.issue_item(
        db, IssueRequest(item_id=items[1].id, employee_id=employee.id, issue_date=date(2024, 1, 15)), user_id=None
    )
    assert log["issued_by_user_id"] is None
    assert log["status"].value == "Issued"
    assert db.get(Item, items[1].id).status == ItemStatus.issued


def test_logs_limited_to_own_issues_without_read_all(db, stocked, monkeypatch):
    items, employee = stocked
    clerk = User(username="clerk", hashed_password="x", role=UserRole.management)
    other = User(username="other", hashed_password="x", role=UserRole.operator)
    db.add_all([clerk, other])
    db.commit()
    monkeypatch.setitem(
        ROLE_PERMISSIONS,
        UserRole.management,
        ROLE_PERMISSIONS[UserRole.management] - {Permission.issuance_read_all},
    )

    db.add_all([
        IssuanceLog(item_id=items[0].id, employee_id=employee.id, issue_date=date(2024, 1, 1),
                    issued_by_user_id=clerk.id),
        IssuanceLog(item_id=items[1].id, employee_id=employee.id, issue_date=date(2024, 1, 2),
                    issued_by_user_id=other.id),
    ])
    db.commit()

    assert [log["item_id"] for log in svc.get_logs(db, clerk)] == [items[0].id]
    assert len(svc.get_logs(db, other)) == 2
