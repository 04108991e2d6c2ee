from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from inventory.database import get_db
from inventory.permissions import Permission
from inventory.schemas.common import Message
from inventory.schemas.employee import (
    EmployeeCreate, EmployeeUpdate, EmployeeResponse, UniqueDepartment, UniqueDesignation,
)
from inventory.security import require_permission
import inventory.services.employee_service as svc

router = APIRouter(prefix="/api/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeResponse])
def list_employees(db: Session = Depends(get_db), _=Depends(require_permission(Permission.employees_read))):
    return svc.get_employees(db)


# Registered before /{employee_id} so "unique" is not parsed as an id
@router.get("/unique/departments", response_model=list[UniqueDepartment])
def unique_departments(db: Session = Depends(get_db), _=Depends(require_permission(Permission.employees_read))):
    return svc.get_unique_departments(db)


@router.get("/unique/designations", response_model=list[UniqueDesignation])
def unique_designations(db: Session = Depends(get_db), _=Depends(require_permission(Permission.employees_read))):
    return svc.get_unique_designations(db)


@router.post("", response_model=EmployeeResponse, status_code=201)
def create_employee(
    data: EmployeeCreate, db: Session = Depends(get_db), _=Depends(require_permission(Permission.employees_write))
):
    return svc.create_employee(db, data)


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(employee_id: int, db: Session = Depends(get_db), _=Depends(require_permission(Permission.employees_read))):
    return svc.get_employee(db, employee_id)


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(
    employee_id: int,
    data: EmployeeUpdate,
    db: Session = Depends(get_db),
    _=Depends(require_permission(Permission.employees_write)),
):
    return svc.update_employee(db, employee_id, data)


@router.delete("/{employee_id}", response_model=Message)
def delete_employee(
    employee_id: int, db: Session = Depends(get_db), _=Depends(require_permission(Permission.employees_write))
):
    svc.delete_employee(db, employee_id)
    return {"message": "Employee deleted successfully"}
