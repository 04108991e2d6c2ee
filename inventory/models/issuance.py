import enum
from datetime import date
from sqlalchemy import ForeignKey, Date, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from inventory.database import Base


class IssuanceStatus(str, enum.Enum):
    issued = "Issued"
    returned = "Returned"


class IssuanceLog(Base):
    """One row per issue event; closed by setting return_date on receive."""

    __tablename__ = "issuance_logs"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    item_id: Mapped[int] = mapped_column(ForeignKey("items.id"), nullable=False, index=True)
    employee_id: Mapped[int] = mapped_column(ForeignKey("employees.id"), nullable=False, index=True)
    issue_date: Mapped[date] = mapped_column(Date, nullable=False)
    return_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[IssuanceStatus] = mapped_column(
        SAEnum(IssuanceStatus, values_callable=lambda e: [x.value for x in e]),
        default=IssuanceStatus.issued,
        nullable=False,
    )
    issued_by_user_id: Mapped[int | None] = mapped_column(ForeignKey("users.id"), nullable=True, index=True)

    item: Mapped["Item"] = relationship(back_populates="issuance_logs")
    employee: Mapped["Employee"] = relationship(back_populates="issuance_logs")
    issued_by_user: Mapped["User | None"] = relationship(back_populates="issuance_logs")
