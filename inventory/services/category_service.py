import logging
from sqlalchemy.orm import Session
from sqlalchemy import select, func
from fastapi import HTTPException
from inventory.models.category import Category
from inventory.models.item import Item
from inventory.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


def get_categories(db: Session) -> list[Category]:
    return db.scalars(select(Category).order_by(Category.category_name)).all()


def get_category(db: Session, category_id: int) -> Category:
    category = db.get(Category, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


def _ensure_unique_name(db: Session, name: str, exclude_id: int | None = None) -> None:
    existing = db.scalar(select(Category).where(Category.category_name == name))
    if existing and existing.id != exclude_id:
        raise HTTPException(status_code=409, detail="Category already exists")


def create_category(db: Session, data: CategoryCreate) -> Category:
    _ensure_unique_name(db, data.category_name)
    category = Category(category_name=data.category_name)
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


def update_category(db: Session, category_id: int, data: CategoryUpdate) -> Category:
    category = get_category(db, category_id)
    _ensure_unique_name(db, data.category_name, exclude_id=category_id)
    category.category_name = data.category_name
    db.commit()
    db.refresh(category)
    return category


def delete_category(db: Session, category_id: int) -> None:
    category = get_category(db, category_id)
    item_count = db.scalar(
        select(func.count()).select_from(Item).where(Item.category_id == category_id)
    )
    if item_count > 0:
        raise HTTPException(
            status_code=400,
            detail={
                "message": "Cannot delete category. It is being used by items in the inventory.",
                "item_count": item_count,
            },
        )
    db.delete(category)
    db.commit()
    logger.info("AUDIT: category %s (%s) deleted", category_id, category.category_name)
