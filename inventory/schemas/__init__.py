from inventory.schemas.common import Message
from inventory.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse
from inventory.schemas.item import ItemCreate, ItemUpdate, ItemResponse
from inventory.schemas.employee import (
    EmployeeCreate, EmployeeUpdate, EmployeeResponse,
    DepartmentCreate, DepartmentResponse, DesignationCreate, DesignationResponse,
)
from inventory.schemas.user import UserCreate, UserUpdate, UserResponse, LoginRequest, LoginResponse
from inventory.schemas.issuance import (
    IssueRequest, IssuePeripheralsRequest, ReceiveRequest,
    IssuanceLogResponse, IssuePeripheralsResponse,
)
from inventory.schemas.document import DocumentResponse, DocumentUploadResponse, DocumentDescriptionUpdate
from inventory.schemas.composite import CompositeItemCreate, CompositeItemResponse
from inventory.schemas.stock import StockCreate, StockUpdate, StockResponse
from inventory.schemas.audit_log import AuditLogCreate, AuditLogResponse

__all__ = [
    "Message",
    "CategoryCreate", "CategoryUpdate", "CategoryResponse",
    "ItemCreate", "ItemUpdate", "ItemResponse",
    "EmployeeCreate", "EmployeeUpdate", "EmployeeResponse",
    "DepartmentCreate", "DepartmentResponse", "DesignationCreate", "DesignationResponse",
    "UserCreate", "UserUpdate", "UserResponse", "LoginRequest", "LoginResponse",
    "IssueRequest", "IssuePeripheralsRequest", "ReceiveRequest",
    "IssuanceLogResponse", "IssuePeripheralsResponse",
    "DocumentResponse", "DocumentUploadResponse", "DocumentDescriptionUpdate",
    "CompositeItemCreate", "CompositeItemResponse",
    "StockCreate", "StockUpdate", "StockResponse",
    "AuditLogCreate", "AuditLogResponse",
]
