import enum
from inventory.models.user import UserRole


class Permission(str, enum.Enum):
    items_read = "items.read"
    items_write = "items.write"
    items_delete = "items.delete"
    categories_write = "categories.write"
    categories_delete = "categories.delete"
    employees_read = "employees.read"
    employees_write = "employees.write"
    registry_manage = "registry.manage"
    issuance_write = "issuance.write"
    issuance_read = "issuance.read"
    issuance_read_all = "issuance.read_all"
    stock_manage = "stock.manage"
    reports_read = "reports.read"
    users_manage = "users.manage"
    audit_manage = "audit.manage"
    composites_write = "composites.write"


_MANAGEMENT = frozenset({
    Permission.items_read,
    Permission.employees_read,
    Permission.issuance_read,
    Permission.issuance_read_all,
    Permission.reports_read,
})

_OPERATOR = _MANAGEMENT | {
    Permission.items_write,
    Permission.categories_write,
    Permission.employees_write,
    Permission.registry_manage,
    Permission.issuance_write,
    Permission.stock_manage,
    Permission.composites_write,
}

ROLE_PERMISSIONS: dict[UserRole, frozenset[Permission]] = {
    UserRole.admin: frozenset(Permission),
    UserRole.operator: frozenset(_OPERATOR),
    UserRole.management: _MANAGEMENT,
}


def has_permission(role: UserRole | str, permission: Permission) -> bool:
    try:
        role = UserRole(role)
    except ValueError:
        return False
    return permission in ROLE_PERMISSIONS.get(role, frozenset())
