from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from inventory.database import get_db
from inventory.permissions import Permission
from inventory.schemas.audit_log import AuditLogCreate, AuditLogResponse
from inventory.schemas.common import Message
from inventory.security import require_permission
import inventory.services.audit_log_service as svc

router = APIRouter(
    prefix="/api/audit-logs",
    tags=["audit-logs"],
    dependencies=[Depends(require_permission(Permission.audit_manage))],
)


@router.get("", response_model=list[AuditLogResponse])
def list_audit_logs(
    user_id: int | None = Query(None),
    item_id: int | None = Query(None),
    action: str = Query(""),
    db: Session = Depends(get_db),
):
    return svc.get_audit_logs(db, user_id=user_id, item_id=item_id, action=action)


@router.get("/{audit_id}", response_model=AuditLogResponse)
def get_audit_log(audit_id: int, db: Session = Depends(get_db)):
    return svc.get_audit_log(db, audit_id)


@router.post("", response_model=AuditLogResponse, status_code=201)
def create_audit_log(data: AuditLogCreate, db: Session = Depends(get_db)):
    return svc.create_audit_log(db, data)


@router.delete("/{audit_id}", response_model=Message)
def delete_audit_log(audit_id: int, db: Session = Depends(get_db)):
    svc.delete_audit_log(db, audit_id)
    return {"message": "Audit log deleted successfully"}
