from datetime import datetime, date
from pydantic import BaseModel, Field
from inventory.models.item import ItemStatus


class ItemBase(BaseModel):
    category_id: int
    serial_number: str = Field(..., min_length=1, max_length=128)
    brand: str = Field(..., min_length=1, max_length=128)
    model: str = Field(..., min_length=1, max_length=128)
    specifications: str | None = None
    vendor: str | None = None
    date_of_purchase: date | None = None
    warranty_end_date: date | None = None
    status: ItemStatus = ItemStatus.in_stock


class ItemCreate(ItemBase):
    pass


class ItemUpdate(BaseModel):
    category_id: int | None = None
    serial_number: str | None = Field(None, min_length=1, max_length=128)
    brand: str | None = None
    model: str | None = None
    specifications: str | None = None
    vendor: str | None = None
    date_of_purchase: date | None = None
    warranty_end_date: date | None = None
    status: ItemStatus | None = None


class ItemResponse(ItemBase):
    id: int
    category_name: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
