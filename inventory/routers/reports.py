from datetime import date
from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session
from inventory.database import get_db
from inventory.permissions import Permission
from inventory.schemas.issuance import IssuanceLogResponse
from inventory.schemas.item import ItemResponse
from inventory.schemas.report import StockReport, EmployeeHolding
from inventory.security import require_permission
import inventory.services.report_service as svc
import inventory.services.issuance_service as issuance_svc
import inventory.services.export_service as export_svc

router = APIRouter(
    prefix="/api/reports",
    tags=["reports"],
    dependencies=[Depends(require_permission(Permission.reports_read))],
)

_XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.get("/stock", response_model=StockReport)
def stock_report(db: Session = Depends(get_db)):
    return svc.stock_report(db)


@router.get("/items/{category}", response_model=list[ItemResponse])
def items_by_category(category: str, db: Session = Depends(get_db)):
    return svc.items_by_category(db, category)


@router.get("/model/{model}", response_model=list[ItemResponse])
def items_by_model(model: str, db: Session = Depends(get_db)):
    return svc.items_by_model(db, model)


@router.get("/employee/{employee_id}", response_model=list[EmployeeHolding])
def employee_holdings(employee_id: int, db: Session = Depends(get_db)):
    return svc.items_held_by_employee(db, employee_id)


@router.get("/transactions", response_model=list[IssuanceLogResponse])
def transactions(
    date_from: date | None = Query(None),
    date_to: date | None = Query(None),
    db: Session = Depends(get_db),
):
    return issuance_svc.get_logs_between(db, date_from, date_to)


@router.get("/export/items.xlsx")
def export_items(db: Session = Depends(get_db)):
    return Response(
        content=export_svc.export_items_excel(db),
        media_type=_XLSX,
        headers={"Content-Disposition": "attachment; filename=items.xlsx"},
    )


@router.get("/export/issuance.xlsx")
def export_issuance(db: Session = Depends(get_db)):
    return Response(
        content=export_svc.export_issuance_excel(db),
        media_type=_XLSX,
        headers={"Content-Disposition": "attachment; filename=issuance.xlsx"},
    )
