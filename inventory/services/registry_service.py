"""Departments and designations: flat name registries with unique names."""
from sqlalchemy.orm import Session
from sqlalchemy import select
from fastapi import HTTPException
from inventory.models.employee import Department, Designation


def get_departments(db: Session) -> list[Department]:
    return db.scalars(select(Department).order_by(Department.department_name)).all()


def get_department(db: Session, department_id: int) -> Department:
    department = db.get(Department, department_id)
    if not department:
        raise HTTPException(status_code=404, detail="Department not found")
    return department


def _ensure_department_name_free(db: Session, name: str, exclude_id: int | None = None) -> None:
    existing = db.scalar(select(Department).where(Department.department_name == name))
    if existing and existing.id != exclude_id:
        raise HTTPException(status_code=409, detail="Department already exists")


def create_department(db: Session, name: str) -> Department:
    _ensure_department_name_free(db, name)
    department = Department(department_name=name)
    db.add(department)
    db.commit()
    db.refresh(department)
    return department


def update_department(db: Session, department_id: int, name: str) -> Department:
    department = get_department(db, department_id)
    _ensure_department_name_free(db, name, exclude_id=department_id)
    department.department_name = name
    db.commit()
    db.refresh(department)
    return department


def delete_department(db: Session, department_id: int) -> None:
    db.delete(get_department(db, department_id))
    db.commit()


def get_designations(db: Session) -> list[Designation]:
    return db.scalars(select(Designation).order_by(Designation.designation_title)).all()


def get_designation(db: Session, designation_id: int) -> Designation:
    designation = db.get(Designation, designation_id)
    if not designation:
        raise HTTPException(status_code=404, detail="Designation not found")
    return designation


def _ensure_designation_title_free(db: Session, title: str, exclude_id: int | None = None) -> None:
    existing = db.scalar(select(Designation).where(Designation.designation_title == title))
    if existing and existing.id != exclude_id:
        raise HTTPException(status_code=409, detail="Designation already exists")


def create_designation(db: Session, title: str) -> Designation:
    _ensure_designation_title_free(db, title)
    designation = Designation(designation_title=title)
    db.add(designation)
    db.commit()
    db.refresh(designation)
    return designation


def update_designation(db: Session, designation_id: int, title: str) -> Designation:
    designation = get_designation(db, designation_id)
    _ensure_designation_title_free(db, title, exclude_id=designation_id)
    designation.designation_title = title
    db.commit()
    db.refresh(designation)
    return designation


def delete_designation(db: Session, designation_id: int) -> None:
    db.delete(get_designation(db, designation_id))
    db.commit()
