from sqlalchemy.orm import Session
from sqlalchemy import select, func
from inventory.models.item import Item, ItemStatus
from inventory.models.category import Category
from inventory.services.employee_service import get_employee
from inventory.services.issuance_service import get_open_logs_for_employee


def stock_report(db: Session) -> dict:
    by_status = {s.value: 0 for s in ItemStatus}
    for status, count in db.execute(select(Item.status, func.count()).group_by(Item.status)).all():
        by_status[ItemStatus(status).value] = count

    by_category = {
        name: count
        for name, count in db.execute(
            select(Category.category_name, func.count(Item.id))
            .join(Item, Item.category_id == Category.id, isouter=True)
            .group_by(Category.category_name)
            .order_by(Category.category_name)
        ).all()
    }
    return {
        "total_items": sum(by_status.values()),
        "by_status": by_status,
        "by_category": by_category,
    }


def items_by_category(db: Session, category_name: str) -> list[Item]:
    return db.scalars(
        select(Item)
        .join(Category, Category.id == Item.category_id)
        .where(func.lower(Category.category_name) == category_name.lower())
        .order_by(Item.brand, Item.model)
    ).all()


def items_by_model(db: Session, model: str) -> list[Item]:
    return db.scalars(
        select(Item).where(Item.model.ilike(f"%{model}%")).order_by(Item.brand, Item.model)
    ).all()


def items_held_by_employee(db: Session, employee_id: int) -> list[dict]:
    get_employee(db, employee_id)
    return [
        {
            "log_id": log.id,
            "item_id": log.item_id,
            "serial_number": log.item.serial_number,
            "brand": log.item.brand,
            "model": log.item.model,
            "issue_date": log.issue_date,
        }
        for log in get_open_logs_for_employee(db, employee_id)
    ]
