from sqlalchemy.orm import Session
from sqlalchemy import select
from fastapi import HTTPException
from inventory.models.composite import CompositeItem, COMPONENT_FIELDS
from inventory.models.item import Item
from inventory.schemas.composite import CompositeItemCreate


def get_composites(db: Session) -> list[CompositeItem]:
    return db.scalars(select(CompositeItem).order_by(CompositeItem.id)).all()


def get_composite(db: Session, composite_id: int) -> CompositeItem:
    composite = db.get(CompositeItem, composite_id)
    if not composite:
        raise HTTPException(status_code=404, detail="Composite item not found")
    return composite


def create_composite(db: Session, data: CompositeItemCreate) -> CompositeItem:
    values = data.model_dump()
    for field in COMPONENT_FIELDS:
        item_id = values.get(field)
        if item_id is not None and not db.get(Item, item_id):
            raise HTTPException(status_code=404, detail=f"Item {item_id} ({field}) not found")
    composite = CompositeItem(**values)
    db.add(composite)
    db.commit()
    db.refresh(composite)
    return composite


def delete_composite(db: Session, composite_id: int) -> None:
    db.delete(get_composite(db, composite_id))
    db.commit()
