from datetime import date
from typing import Literal
from pydantic import BaseModel, Field
from inventory.models.issuance import IssuanceStatus


class IssueRequest(BaseModel):
    item_id: int
    employee_id: int
    issue_date: date
    status: Literal["Issued"] = "Issued"


class IssuePeripheralsRequest(BaseModel):
    item_ids: list[int] = Field(..., min_length=1)
    employee_id: int
    issue_date: date


class ReceiveRequest(BaseModel):
    log_id: int
    return_date: date
    status: Literal["Returned"] = "Returned"


class IssuanceLogResponse(BaseModel):
    id: int
    item_id: int
    employee_id: int
    issue_date: date
    return_date: date | None
    status: IssuanceStatus
    issued_by_user_id: int | None
    # Denormalized for list views
    serial_number: str | None = None
    brand: str | None = None
    model: str | None = None
    employee_name: str | None = None
    department_id: str | None = None
    department_name: str | None = None
    issued_by_username: str | None = None


class IssuePeripheralsResponse(BaseModel):
    message: str
    logs: list[IssuanceLogResponse]
