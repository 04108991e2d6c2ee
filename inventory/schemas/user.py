from datetime import datetime
from pydantic import BaseModel, Field
from inventory.models.user import UserRole


class UserBase(BaseModel):
    username: str = Field(..., min_length=2, max_length=64)
    role: UserRole


class UserCreate(UserBase):
    password: str = Field(..., min_length=6)


class UserUpdate(BaseModel):
    username: str | None = Field(None, min_length=2, max_length=64)
    role: UserRole | None = None
    password: str | None = Field(None, min_length=6)


class UserResponse(UserBase):
    id: int
    created_at: datetime

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginUser(BaseModel):
    id: int
    username: str
    role: UserRole

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    token: str
    user: LoginUser
