import logging
from sqlalchemy.orm import Session
from sqlalchemy import select, func, or_, delete
from fastapi import HTTPException
from inventory.models.item import Item, ItemStatus
from inventory.models.category import Category, PERIPHERAL_CATEGORIES
from inventory.models.issuance import IssuanceLog
from inventory.models.document import ItemDocument
from inventory.models.composite import CompositeItem, COMPONENT_FIELDS
from inventory.models.stock import Stock
from inventory.schemas.item import ItemCreate, ItemUpdate
from inventory.services.audit_log_service import record_action

logger = logging.getLogger(__name__)


def get_items(
    db: Session,
    search: str = "",
    brand: str = "",
    category: int | None = None,
    status: ItemStatus | None = None,
) -> list[Item]:
    query = select(Item)
    if search:
        term = f"%{search}%"
        query = query.where(
            or_(Item.serial_number.ilike(term), Item.model.ilike(term), Item.brand.ilike(term))
        )
    if brand:
        query = query.where(Item.brand == brand)
    if category is not None:
        query = query.where(Item.category_id == category)
    if status is not None:
        query = query.where(Item.status == status)
    return db.scalars(query.order_by(Item.id)).all()


def get_available_peripherals(db: Session) -> list[Item]:
    return db.scalars(
        select(Item)
        .join(Category, Category.id == Item.category_id)
        .where(Category.category_name.in_(PERIPHERAL_CATEGORIES), Item.status == ItemStatus.in_stock)
        .order_by(Category.category_name, Item.brand, Item.model)
    ).all()


def get_item(db: Session, item_id: int) -> Item:
    item = db.get(Item, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")
    return item


def get_item_by_serial(db: Session, serial_number: str) -> Item | None:
    return db.scalar(select(Item).where(Item.serial_number == serial_number))


def _ensure_category(db: Session, category_id: int) -> None:
    if not db.get(Category, category_id):
        raise HTTPException(status_code=404, detail="Category not found")


def create_item(db: Session, data: ItemCreate, user_id: int | None = None) -> Item:
    _ensure_category(db, data.category_id)
    if get_item_by_serial(db, data.serial_number):
        raise HTTPException(status_code=409, detail="An item with this serial number already exists")
    item = Item(**data.model_dump())
    db.add(item)
    db.flush()
    record_action(db, user_id, f"Created item {item.serial_number}", item_id=item.id)
    db.commit()
    db.refresh(item)
    return item


def update_item(db: Session, item_id: int, data: ItemUpdate, user_id: int | None = None) -> Item:
    item = get_item(db, item_id)
    changes = data.model_dump(exclude_unset=True)
    if changes.get("category_id") is not None:
        _ensure_category(db, changes["category_id"])
    serial = changes.get("serial_number")
    if serial and serial != item.serial_number:
        other = get_item_by_serial(db, serial)
        if other and other.id != item.id:
            raise HTTPException(status_code=409, detail="Another item with this serial number already exists")
    for field, value in changes.items():
        if value is None and field in ("category_id", "serial_number", "brand", "model", "status"):
            continue
        setattr(item, field, value)
    record_action(db, user_id, f"Updated item {item.serial_number}", item_id=item.id)
    db.commit()
    db.refresh(item)
    return item


def count_dependents(db: Session, item_id: int) -> dict[str, int]:
    composite_refs = or_(*(getattr(CompositeItem, f) == item_id for f in COMPONENT_FIELDS))
    return {
        "issuance_count": db.scalar(
            select(func.count()).select_from(IssuanceLog).where(IssuanceLog.item_id == item_id)
        ),
        "document_count": db.scalar(
            select(func.count()).select_from(ItemDocument).where(ItemDocument.item_id == item_id)
        ),
        "composite_count": db.scalar(
            select(func.count()).select_from(CompositeItem).where(composite_refs)
        ),
    }


_DEPENDENT_MESSAGES = {
    "issuance_count": "Cannot delete item. It has issuance history.",
    "document_count": "Cannot delete item. It has associated documents. Remove the documents first.",
    "composite_count": "Cannot delete item. It is part of composite items. Remove it from them first.",
}


def delete_item(db: Session, item_id: int, user_id: int | None = None) -> None:
    item = get_item(db, item_id)
    counts = count_dependents(db, item_id)
    for key, message in _DEPENDENT_MESSAGES.items():
        if counts[key] > 0:
            logger.info("Refusing to delete item %s: %s=%s", item_id, key, counts[key])
            raise HTTPException(status_code=400, detail={"message": message, key: counts[key]})

    serial = item.serial_number
    db.execute(delete(Stock).where(Stock.item_id == item_id))
    db.delete(item)
    record_action(db, user_id, f"Deleted item {serial}")
    db.commit()
    logger.info("AUDIT: item %s (%s) deleted by user %s", item_id, serial, user_id)
