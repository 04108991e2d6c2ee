"""Issue / return workflow.

An item is lent out by flipping its status to Issued and opening an
IssuanceLog (return_date NULL). Receiving closes the log and puts the item
back In Stock. Every path commits once, so the item status and the open log
are written together or not at all.
"""
import logging
from datetime import date

from fastapi import HTTPException
from sqlalchemy import select, and_, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inventory.models.employee import Department
from inventory.models.issuance import IssuanceLog, IssuanceStatus
from inventory.models.item import Item, ItemStatus
from inventory.models.user import User
from inventory.permissions import Permission, has_permission
from inventory.schemas.issuance import IssueRequest, IssuePeripheralsRequest, ReceiveRequest
from inventory.services.audit_log_service import record_action
from inventory.services.employee_service import get_employee

logger = logging.getLogger(__name__)


def _commit(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise


def issue_item(db: Session, data: IssueRequest, user_id: int | None = None) -> dict:
    item = db.get(Item, data.item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")
    employee = get_employee(db, data.employee_id)
    if item.status != ItemStatus.in_stock:
        raise HTTPException(status_code=400, detail="Item is not available for issuance")

    item.status = ItemStatus.issued
    log = IssuanceLog(
        item_id=item.id,
        employee_id=employee.id,
        issue_date=data.issue_date,
        status=IssuanceStatus.issued,
        issued_by_user_id=user_id,
    )
    db.add(log)
    record_action(db, user_id, f"Issued item {item.serial_number} to {employee.employee_name}", item_id=item.id)
    _commit(db)
    db.refresh(log)

    logger.info("AUDIT: item %s issued to employee %s by user %s", item.id, employee.id, user_id)
    return to_log_dict(db, log)


def issue_peripherals(db: Session, data: IssuePeripheralsRequest, user_id: int | None = None) -> dict:
    """All-or-nothing: a single unavailable item rejects the whole batch."""
    item_ids = list(dict.fromkeys(data.item_ids))
    employee = get_employee(db, data.employee_id)

    items = db.scalars(select(Item).where(Item.id.in_(item_ids))).all()
    found = {i.id for i in items}
    missing = [i for i in item_ids if i not in found]
    if missing:
        raise HTTPException(
            status_code=404,
            detail={"message": "One or more items not found", "missing_items": missing},
        )

    unavailable = [i.id for i in items if i.status != ItemStatus.in_stock]
    if unavailable:
        raise HTTPException(
            status_code=400,
            detail={"message": "Some items are not available for issuance", "unavailable_items": unavailable},
        )

    logs = []
    for item in sorted(items, key=lambda i: item_ids.index(i.id)):
        item.status = ItemStatus.issued
        log = IssuanceLog(
            item_id=item.id,
            employee_id=employee.id,
            issue_date=data.issue_date,
            status=IssuanceStatus.issued,
            issued_by_user_id=user_id,
        )
        db.add(log)
        logs.append(log)
        record_action(
            db, user_id, f"Issued peripheral {item.serial_number} to {employee.employee_name}", item_id=item.id
        )
    _commit(db)

    for log in logs:
        db.refresh(log)
    logger.info("AUDIT: %d peripherals issued to employee %s by user %s", len(logs), employee.id, user_id)
    return {
        "message": f"{len(logs)} peripheral device(s) issued successfully",
        "logs": [to_log_dict(db, log) for log in logs],
    }


def receive_item(db: Session, data: ReceiveRequest, user_id: int | None = None) -> dict:
    log = db.get(IssuanceLog, data.log_id)
    if not log:
        raise HTTPException(status_code=404, detail="Issuance log not found")
    if log.status == IssuanceStatus.returned or log.return_date is not None:
        raise HTTPException(status_code=400, detail="Item has already been returned")
    if data.return_date < log.issue_date:
        raise HTTPException(status_code=400, detail="Return date cannot be before the issue date")

    log.return_date = data.return_date
    log.status = IssuanceStatus.returned
    item = db.get(Item, log.item_id)
    if item:
        item.status = ItemStatus.in_stock
    record_action(
        db, user_id, f"Received item {item.serial_number if item else log.item_id}", item_id=log.item_id
    )
    _commit(db)
    db.refresh(log)

    logger.info("AUDIT: log %s closed, item %s returned, by user %s", log.id, log.item_id, user_id)
    return to_log_dict(db, log)


def get_logs(
    db: Session,
    user: User,
    status: IssuanceStatus | None = None,
    employee_id: int | None = None,
    item_id: int | None = None,
) -> list[dict]:
    query = select(IssuanceLog)
    if not has_permission(user.role, Permission.issuance_read_all):
        query = query.where(IssuanceLog.issued_by_user_id == user.id)
    if status is not None:
        query = query.where(IssuanceLog.status == status)
    if employee_id is not None:
        query = query.where(IssuanceLog.employee_id == employee_id)
    if item_id is not None:
        query = query.where(IssuanceLog.item_id == item_id)
    logs = db.scalars(query.order_by(IssuanceLog.issue_date.desc(), IssuanceLog.id.desc())).all()
    return [to_log_dict(db, log) for log in logs]


def get_my_issued_items(db: Session, user: User) -> list[dict]:
    logs = db.scalars(
        select(IssuanceLog)
        .where(IssuanceLog.issued_by_user_id == user.id)
        .order_by(IssuanceLog.issue_date.desc(), IssuanceLog.id.desc())
    ).all()
    return [to_log_dict(db, log) for log in logs]


def get_log(db: Session, log_id: int) -> IssuanceLog:
    log = db.get(IssuanceLog, log_id)
    if not log:
        raise HTTPException(status_code=404, detail="Issuance log not found")
    return log


def get_open_logs_for_employee(db: Session, employee_id: int) -> list[IssuanceLog]:
    return db.scalars(
        select(IssuanceLog)
        .where(IssuanceLog.employee_id == employee_id, IssuanceLog.return_date.is_(None))
        .order_by(IssuanceLog.issue_date)
    ).all()


def get_logs_between(db: Session, date_from: date | None, date_to: date | None) -> list[dict]:
    """Logs with an issue or return date inside the (inclusive) range."""
    query = select(IssuanceLog)
    if date_from is not None or date_to is not None:
        issued_in = []
        returned_in = [IssuanceLog.return_date.is_not(None)]
        if date_from is not None:
            issued_in.append(IssuanceLog.issue_date >= date_from)
            returned_in.append(IssuanceLog.return_date >= date_from)
        if date_to is not None:
            issued_in.append(IssuanceLog.issue_date <= date_to)
            returned_in.append(IssuanceLog.return_date <= date_to)
        query = query.where(or_(and_(*issued_in), and_(*returned_in)))
    logs = db.scalars(query.order_by(IssuanceLog.issue_date.desc(), IssuanceLog.id.desc())).all()
    return [to_log_dict(db, log) for log in logs]


def _department_name(db: Session, department_id: str | None) -> str | None:
    # department_id is free text: either a registry id or the name itself
    if not department_id:
        return None
    if department_id.isdigit():
        department = db.get(Department, int(department_id))
        if department:
            return department.department_name
    return department_id


def to_log_dict(db: Session, log: IssuanceLog) -> dict:
    item = log.item
    employee = log.employee
    return {
        "id": log.id,
        "item_id": log.item_id,
        "employee_id": log.employee_id,
        "issue_date": log.issue_date,
        "return_date": log.return_date,
        "status": log.status,
        "issued_by_user_id": log.issued_by_user_id,
        "serial_number": item.serial_number if item else None,
        "brand": item.brand if item else None,
        "model": item.model if item else None,
        "employee_name": employee.employee_name if employee else None,
        "department_id": employee.department_id if employee else None,
        "department_name": _department_name(db, employee.department_id) if employee else None,
        "issued_by_username": log.issued_by_user.username if log.issued_by_user else None,
    }
