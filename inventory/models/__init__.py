from inventory.models.user import User, UserRole
from inventory.models.category import Category, PERIPHERAL_CATEGORIES
from inventory.models.item import Item, ItemStatus
from inventory.models.employee import Employee, Department, Designation
from inventory.models.issuance import IssuanceLog, IssuanceStatus
from inventory.models.document import ItemDocument
from inventory.models.composite import CompositeItem, COMPONENT_FIELDS
from inventory.models.stock import Stock
from inventory.models.audit_log import AuditLog

__all__ = [
    "User", "UserRole",
    "Category", "PERIPHERAL_CATEGORIES",
    "Item", "ItemStatus",
    "Employee", "Department", "Designation",
    "IssuanceLog", "IssuanceStatus",
    "ItemDocument",
    "CompositeItem", "COMPONENT_FIELDS",
    "Stock",
    "AuditLog",
]
