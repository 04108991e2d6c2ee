import enum
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from inventory.database import Base


class UserRole(str, enum.Enum):
    admin = "Admin"
    operator = "Operator"
    management = "Management"


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    username: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        SAEnum(UserRole, values_callable=lambda e: [x.value for x in e]),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    issuance_logs: Mapped[list["IssuanceLog"]] = relationship(back_populates="issued_by_user")
    documents: Mapped[list["ItemDocument"]] = relationship(back_populates="uploaded_by_user")
