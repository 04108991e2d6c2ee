from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from inventory.database import get_db
from inventory.permissions import Permission
from inventory.schemas.common import Message
from inventory.schemas.employee import DepartmentCreate, DepartmentResponse, DesignationCreate, DesignationResponse
from inventory.security import require_permission
import inventory.services.registry_service as svc

departments = APIRouter(
    prefix="/api/departments",
    tags=["departments"],
    dependencies=[Depends(require_permission(Permission.registry_manage))],
)
designations = APIRouter(
    prefix="/api/designations",
    tags=["designations"],
    dependencies=[Depends(require_permission(Permission.registry_manage))],
)


@departments.get("", response_model=list[DepartmentResponse])
def list_departments(db: Session = Depends(get_db)):
    return svc.get_departments(db)


@departments.get("/{department_id}", response_model=DepartmentResponse)
def get_department(department_id: int, db: Session = Depends(get_db)):
    return svc.get_department(db, department_id)


@departments.post("", response_model=DepartmentResponse, status_code=201)
def create_department(data: DepartmentCreate, db: Session = Depends(get_db)):
    return svc.create_department(db, data.department_name)


@departments.put("/{department_id}", response_model=DepartmentResponse)
def update_department(department_id: int, data: DepartmentCreate, db: Session = Depends(get_db)):
    return svc.update_department(db, department_id, data.department_name)


@departments.delete("/{department_id}", response_model=Message)
def delete_department(department_id: int, db: Session = Depends(get_db)):
    svc.delete_department(db, department_id)
    return {"message": "Department deleted successfully"}


@designations.get("", response_model=list[DesignationResponse])
def list_designations(db: Session = Depends(get_db)):
    return svc.get_designations(db)


@designations.get("/{designation_id}", response_model=DesignationResponse)
def get_designation(designation_id: int, db: Session = Depends(get_db)):
    return svc.get_designation(db, designation_id)


@designations.post("", response_model=DesignationResponse, status_code=201)
def create_designation(data: DesignationCreate, db: Session = Depends(get_db)):
    return svc.create_designation(db, data.designation_title)


@designations.put("/{designation_id}", response_model=DesignationResponse)
def update_designation(designation_id: int, data: DesignationCreate, db: Session = Depends(get_db)):
    return svc.update_designation(db, designation_id, data.designation_title)


@designations.delete("/{designation_id}", response_model=Message)
def delete_designation(designation_id: int, db: Session = Depends(get_db)):
    svc.delete_designation(db, designation_id)
    return {"message": "Designation deleted successfully"}
