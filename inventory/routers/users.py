import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from inventory.database import get_db
from inventory.models.user import User
from inventory.permissions import Permission
from inventory.schemas.common import Message
from inventory.schemas.user import UserCreate, UserUpdate, UserResponse
from inventory.security import require_permission
import inventory.services.user_service as svc

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
def list_users(db: Session = Depends(get_db), _=Depends(require_permission(Permission.users_manage))):
    return svc.get_users(db)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db), _=Depends(require_permission(Permission.users_manage))):
    return svc.get_user(db, user_id)


@router.post("", response_model=UserResponse, status_code=201)
def create_user(
    data: UserCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_permission(Permission.users_manage)),
):
    user = svc.create_user(db, data)
    logger.info("AUDIT: '%s' created user '%s' (role=%s)", admin.username, user.username, user.role.value)
    return user


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    data: UserUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_permission(Permission.users_manage)),
):
    user = svc.update_user(db, user_id, data)
    logger.info("AUDIT: '%s' updated user '%s'", admin.username, user.username)
    return user


@router.delete("/{user_id}", response_model=Message)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_permission(Permission.users_manage)),
):
    svc.delete_user(db, user_id, acting_user_id=admin.id)
    logger.info("AUDIT: '%s' deleted user %s", admin.username, user_id)
    return {"message": "User deleted successfully"}
