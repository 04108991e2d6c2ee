from pydantic import BaseModel, Field


class StockCreate(BaseModel):
    item_id: int
    quantity_in_stock: int = Field(..., ge=0)


class StockUpdate(BaseModel):
    quantity_in_stock: int = Field(..., ge=0)


class StockResponse(StockCreate):
    id: int

    model_config = {"from_attributes": True}
