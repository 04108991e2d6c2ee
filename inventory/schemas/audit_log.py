from datetime import datetime
from pydantic import BaseModel, Field


class AuditLogCreate(BaseModel):
    user_id: int | None = None
    item_id: int | None = None
    action_performed: str = Field(..., min_length=1, max_length=255)


class AuditLogResponse(BaseModel):
    id: int
    user_id: int | None
    item_id: int | None
    action_performed: str
    timestamp: datetime

    model_config = {"from_attributes": True}
