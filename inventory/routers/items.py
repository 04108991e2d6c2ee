from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from inventory.database import get_db
from inventory.models.item import ItemStatus
from inventory.models.user import User
from inventory.permissions import Permission
from inventory.schemas.common import Message
from inventory.schemas.item import ItemCreate, ItemUpdate, ItemResponse
from inventory.security import require_permission
import inventory.services.item_service as svc

router = APIRouter(prefix="/api/items", tags=["items"])


@router.get("", response_model=list[ItemResponse])
def list_items(
    search: str = Query(""),
    brand: str = Query(""),
    category: int | None = Query(None),
    status: ItemStatus | None = Query(None),
    db: Session = Depends(get_db),
    _=Depends(require_permission(Permission.items_read)),
):
    return svc.get_items(db, search=search, brand=brand, category=category, status=status)


@router.get("/peripherals", response_model=list[ItemResponse])
def list_available_peripherals(db: Session = Depends(get_db), _=Depends(require_permission(Permission.items_read))):
    return svc.get_available_peripherals(db)


@router.post("", response_model=ItemResponse, status_code=201)
def create_item(
    data: ItemCreate,
    db: Session = Depends(get_db),
    user: User = Depends(require_permission(Permission.items_write)),
):
    return svc.create_item(db, data, user_id=user.id)


@router.get("/{item_id}", response_model=ItemResponse)
def get_item(item_id: int, db: Session = Depends(get_db), _=Depends(require_permission(Permission.items_read))):
    return svc.get_item(db, item_id)


@router.put("/{item_id}", response_model=ItemResponse)
def update_item(
    item_id: int,
    data: ItemUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(require_permission(Permission.items_write)),
):
    return svc.update_item(db, item_id, data, user_id=user.id)


@router.delete("/{item_id}", response_model=Message)
def delete_item(
    item_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(require_permission(Permission.items_delete)),
):
    svc.delete_item(db, item_id, user_id=user.id)
    return {"message": "Item deleted successfully"}
