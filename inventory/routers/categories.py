from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from inventory.database import get_db
from inventory.permissions import Permission
from inventory.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse
from inventory.schemas.common import Message
from inventory.security import get_current_user, require_permission
import inventory.services.category_service as svc

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=list[CategoryResponse])
def list_categories(db: Session = Depends(get_db), _=Depends(get_current_user)):
    return svc.get_categories(db)


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: int, db: Session = Depends(get_db), _=Depends(get_current_user)):
    return svc.get_category(db, category_id)


@router.post("", response_model=CategoryResponse, status_code=201)
def create_category(
    data: CategoryCreate, db: Session = Depends(get_db), _=Depends(require_permission(Permission.categories_write))
):
    return svc.create_category(db, data)


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    data: CategoryUpdate,
    db: Session = Depends(get_db),
    _=Depends(require_permission(Permission.categories_write)),
):
    return svc.update_category(db, category_id, data)


@router.delete("/{category_id}", response_model=Message)
def delete_category(
    category_id: int, db: Session = Depends(get_db), _=Depends(require_permission(Permission.categories_delete))
):
    svc.delete_category(db, category_id)
    return {"message": "Category deleted successfully"}
