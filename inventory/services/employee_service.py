from sqlalchemy.orm import Session
from sqlalchemy import select, func
from fastapi import HTTPException
from inventory.models.employee import Employee
from inventory.models.issuance import IssuanceLog
from inventory.schemas.employee import EmployeeCreate, EmployeeUpdate


def get_employees(db: Session) -> list[Employee]:
    return db.scalars(select(Employee).order_by(Employee.employee_name)).all()


def get_employee(db: Session, employee_id: int) -> Employee:
    employee = db.get(Employee, employee_id)
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee


def create_employee(db: Session, data: EmployeeCreate) -> Employee:
    employee = Employee(**data.model_dump())
    db.add(employee)
    db.commit()
    db.refresh(employee)
    return employee


def update_employee(db: Session, employee_id: int, data: EmployeeUpdate) -> Employee:
    employee = get_employee(db, employee_id)
    for field, value in data.model_dump().items():
        setattr(employee, field, value)
    db.commit()
    db.refresh(employee)
    return employee


def delete_employee(db: Session, employee_id: int) -> None:
    employee = get_employee(db, employee_id)
    log_count = db.scalar(
        select(func.count()).select_from(IssuanceLog).where(IssuanceLog.employee_id == employee_id)
    )
    if log_count > 0:
        raise HTTPException(
            status_code=400,
            detail={"message": "Cannot delete employee. They have issuance history.", "issuance_count": log_count},
        )
    db.delete(employee)
    db.commit()


def _distinct_non_empty(db: Session, column) -> list[str]:
    return db.scalars(
        select(column).distinct().where(column.is_not(None), column != "").order_by(column)
    ).all()


def get_unique_departments(db: Session) -> list[dict]:
    return [{"department": d} for d in _distinct_non_empty(db, Employee.department_id)]


def get_unique_designations(db: Session) -> list[dict]:
    return [{"designation": d} for d in _distinct_non_empty(db, Employee.designation_id)]
