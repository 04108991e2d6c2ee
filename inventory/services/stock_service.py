from sqlalchemy.orm import Session
from sqlalchemy import select
from fastapi import HTTPException
from inventory.models.stock import Stock
from inventory.models.item import Item
from inventory.schemas.stock import StockCreate, StockUpdate


def get_stock_records(db: Session) -> list[Stock]:
    return db.scalars(select(Stock).order_by(Stock.id)).all()


def get_stock(db: Session, stock_id: int) -> Stock:
    record = db.get(Stock, stock_id)
    if not record:
        raise HTTPException(status_code=404, detail="Stock record not found")
    return record


def create_stock(db: Session, data: StockCreate) -> Stock:
    if not db.get(Item, data.item_id):
        raise HTTPException(status_code=404, detail="Item not found")
    record = Stock(**data.model_dump())
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def update_stock(db: Session, stock_id: int, data: StockUpdate) -> Stock:
    record = get_stock(db, stock_id)
    record.quantity_in_stock = data.quantity_in_stock
    db.commit()
    db.refresh(record)
    return record


def delete_stock(db: Session, stock_id: int) -> None:
    db.delete(get_stock(db, stock_id))
    db.commit()
