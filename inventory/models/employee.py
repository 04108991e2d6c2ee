from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from inventory.database import Base


class Department(Base):
    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    department_name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)


class Designation(Base):
    __tablename__ = "designations"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    designation_title: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)


class Employee(Base):
    """Department and designation are free text, not foreign keys."""

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    employee_name: Mapped[str] = mapped_column(String(255), nullable=False)
    department_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    designation_id: Mapped[str | None] = mapped_column(String(255), nullable=True)

    issuance_logs: Mapped[list["IssuanceLog"]] = relationship(back_populates="employee")
