"""Role -> permission mapping."""
import pytest

from inventory.models.user import UserRole
from inventory.permissions import Permission, ROLE_PERMISSIONS, has_permission


def test_admin_has_every_permission():
    assert ROLE_PERMISSIONS[UserRole.admin] == frozenset(Permission)


@pytest.mark.parametrize("permission", [
    Permission.items_read,
    Permission.employees_read,
    Permission.issuance_read,
    Permission.issuance_read_all,
    Permission.reports_read,
])
def test_management_is_read_only(permission):
    assert has_permission(UserRole.management, permission)


@pytest.mark.parametrize("permission", [
    Permission.items_write,
    Permission.issuance_write,
    Permission.stock_manage,
    Permission.registry_manage,
])
def test_management_cannot_write(permission):
    assert not has_permission(UserRole.management, permission)


def test_operator_can_issue_but_not_delete_items():
    assert has_permission(UserRole.operator, Permission.issuance_write)
    assert not has_permission(UserRole.operator, Permission.items_delete)
    assert not has_permission(UserRole.operator, Permission.categories_delete)


@pytest.mark.parametrize("permission", [Permission.users_manage, Permission.audit_manage])
def test_admin_only_permissions(permission):
    assert has_permission(UserRole.admin, permission)
    assert not has_permission(UserRole.operator, permission)
    assert not has_permission(UserRole.management, permission)


def test_role_given_as_string():
    assert has_permission("Operator", Permission.items_write)
    assert not has_permission("Nobody", Permission.items_read)
