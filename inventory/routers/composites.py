from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from inventory.database import get_db
from inventory.permissions import Permission
from inventory.schemas.common import Message
from inventory.schemas.composite import CompositeItemCreate, CompositeItemResponse
from inventory.security import require_permission
import inventory.services.composite_service as svc

router = APIRouter(prefix="/api/composite-items", tags=["composite-items"])


@router.get("", response_model=list[CompositeItemResponse])
def list_composites(db: Session = Depends(get_db), _=Depends(require_permission(Permission.items_read))):
    return svc.get_composites(db)


@router.get("/{composite_id}", response_model=CompositeItemResponse)
def get_composite(composite_id: int, db: Session = Depends(get_db), _=Depends(require_permission(Permission.items_read))):
    return svc.get_composite(db, composite_id)


@router.post("", response_model=CompositeItemResponse, status_code=201)
def create_composite(
    data: CompositeItemCreate, db: Session = Depends(get_db), _=Depends(require_permission(Permission.composites_write))
):
    return svc.create_composite(db, data)


@router.delete("/{composite_id}", response_model=Message)
def delete_composite(
    composite_id: int, db: Session = Depends(get_db), _=Depends(require_permission(Permission.composites_write))
):
    svc.delete_composite(db, composite_id)
    return {"message": "Composite item deleted successfully"}
