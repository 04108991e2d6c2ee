from pydantic import BaseModel, Field


class EmployeeBase(BaseModel):
    model_config = {"coerce_numbers_to_str": True}

    employee_name: str = Field(..., min_length=1, max_length=255)
    # Free text; older rows may hold numeric ids, newer ones plain names
    department_id: str = Field(..., min_length=1, max_length=255)
    designation_id: str = Field(..., min_length=1, max_length=255)


class EmployeeCreate(EmployeeBase):
    pass


class EmployeeUpdate(EmployeeBase):
    pass


class EmployeeResponse(BaseModel):
    id: int
    employee_name: str
    department_id: str | None
    designation_id: str | None

    model_config = {"from_attributes": True}


class UniqueDepartment(BaseModel):
    department: str


class UniqueDesignation(BaseModel):
    designation: str


class DepartmentCreate(BaseModel):
    department_name: str = Field(..., min_length=1, max_length=255)


class DepartmentResponse(BaseModel):
    id: int
    department_name: str

    model_config = {"from_attributes": True}


class DesignationCreate(BaseModel):
    designation_title: str = Field(..., min_length=1, max_length=255)


class DesignationResponse(BaseModel):
    id: int
    designation_title: str

    model_config = {"from_attributes": True}
