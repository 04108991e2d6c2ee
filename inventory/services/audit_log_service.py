from sqlalchemy.orm import Session
from sqlalchemy import select
from fastapi import HTTPException
from inventory.models.audit_log import AuditLog
from inventory.schemas.audit_log import AuditLogCreate


def record_action(db: Session, user_id: int | None, action: str, item_id: int | None = None) -> AuditLog:
    """Stage an audit row in the caller's transaction; the caller commits."""
    entry = AuditLog(user_id=user_id, item_id=item_id, action_performed=action)
    db.add(entry)
    return entry


def get_audit_logs(
    db: Session,
    user_id: int | None = None,
    item_id: int | None = None,
    action: str | None = None,
) -> list[AuditLog]:
    query = select(AuditLog)
    if user_id is not None:
        query = query.where(AuditLog.user_id == user_id)
    if item_id is not None:
        query = query.where(AuditLog.item_id == item_id)
    if action:
        query = query.where(AuditLog.action_performed.ilike(f"%{action}%"))
    return db.scalars(query.order_by(AuditLog.timestamp.desc(), AuditLog.id.desc())).all()


def get_audit_log(db: Session, audit_id: int) -> AuditLog:
    entry = db.get(AuditLog, audit_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Audit log not found")
    return entry


def create_audit_log(db: Session, data: AuditLogCreate) -> AuditLog:
    entry = AuditLog(**data.model_dump())
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry


def delete_audit_log(db: Session, audit_id: int) -> None:
    entry = get_audit_log(db, audit_id)
    db.delete(entry)
    db.commit()
