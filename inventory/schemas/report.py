from datetime import date
from pydantic import BaseModel


class StockReport(BaseModel):
    total_items: int
    by_status: dict[str, int]
    by_category: dict[str, int]


class EmployeeHolding(BaseModel):
    log_id: int
    item_id: int
    serial_number: str
    brand: str
    model: str
    issue_date: date
