from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session
from inventory.database import get_db
from inventory.models.issuance import IssuanceStatus
from inventory.models.user import User
from inventory.permissions import Permission
from inventory.schemas.issuance import (
    IssueRequest, IssuePeripheralsRequest, ReceiveRequest,
    IssuanceLogResponse, IssuePeripheralsResponse,
)
from inventory.security import require_permission
import inventory.services.issuance_service as svc
import inventory.services.export_service as export_svc

router = APIRouter(prefix="/api/issuance", tags=["issuance"])


@router.post("/issue", response_model=IssuanceLogResponse, status_code=201)
def issue_item(
    data: IssueRequest,
    db: Session = Depends(get_db),
    user: User = Depends(require_permission(Permission.issuance_write)),
):
    return svc.issue_item(db, data, user_id=user.id)


@router.post("/issue-peripherals", response_model=IssuePeripheralsResponse, status_code=201)
def issue_peripherals(
    data: IssuePeripheralsRequest,
    db: Session = Depends(get_db),
    user: User = Depends(require_permission(Permission.issuance_write)),
):
    return svc.issue_peripherals(db, data, user_id=user.id)


@router.post("/receive", response_model=IssuanceLogResponse)
def receive_item(
    data: ReceiveRequest,
    db: Session = Depends(get_db),
    user: User = Depends(require_permission(Permission.issuance_write)),
):
    return svc.receive_item(db, data, user_id=user.id)


@router.get("/logs", response_model=list[IssuanceLogResponse])
def list_logs(
    status: IssuanceStatus | None = Query(None),
    employee_id: int | None = Query(None),
    item_id: int | None = Query(None),
    db: Session = Depends(get_db),
    user: User = Depends(require_permission(Permission.issuance_read)),
):
    return svc.get_logs(db, user, status=status, employee_id=employee_id, item_id=item_id)


@router.get("/my-items", response_model=list[IssuanceLogResponse])
def my_issued_items(
    db: Session = Depends(get_db),
    user: User = Depends(require_permission(Permission.issuance_read)),
):
    return svc.get_my_issued_items(db, user)


@router.get("/logs/{log_id}/handover.pdf")
def handover_pdf(log_id: int, db: Session = Depends(get_db), _=Depends(require_permission(Permission.issuance_read))):
    pdf_bytes = export_svc.export_handover_pdf(db, log_id)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=handover-{log_id}.pdf"},
    )
