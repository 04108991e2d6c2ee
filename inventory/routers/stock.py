from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from inventory.database import get_db
from inventory.permissions import Permission
from inventory.schemas.common import Message
from inventory.schemas.stock import StockCreate, StockUpdate, StockResponse
from inventory.security import require_permission
import inventory.services.stock_service as svc

router = APIRouter(
    prefix="/api/stock",
    tags=["stock"],
    dependencies=[Depends(require_permission(Permission.stock_manage))],
)


@router.get("", response_model=list[StockResponse])
def list_stock(db: Session = Depends(get_db)):
    return svc.get_stock_records(db)


@router.get("/{stock_id}", response_model=StockResponse)
def get_stock(stock_id: int, db: Session = Depends(get_db)):
    return svc.get_stock(db, stock_id)


@router.post("", response_model=StockResponse, status_code=201)
def create_stock(data: StockCreate, db: Session = Depends(get_db)):
    return svc.create_stock(db, data)


@router.put("/{stock_id}", response_model=StockResponse)
def update_stock(stock_id: int, data: StockUpdate, db: Session = Depends(get_db)):
    return svc.update_stock(db, stock_id, data)


@router.delete("/{stock_id}", response_model=Message)
def delete_stock(stock_id: int, db: Session = Depends(get_db)):
    svc.delete_stock(db, stock_id)
    return {"message": "Stock record deleted successfully"}
