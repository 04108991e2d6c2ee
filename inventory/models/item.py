import enum
from datetime import datetime, timezone, date
from sqlalchemy import ForeignKey, String, Text, DateTime, Date, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from inventory.database import Base


class ItemStatus(str, enum.Enum):
    in_stock = "In Stock"
    issued = "Issued"
    out_of_stock = "Out of Stock"


class Item(Base):
    __tablename__ = "items"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    category_id: Mapped[int] = mapped_column(ForeignKey("categories.id"), nullable=False, index=True)
    serial_number: Mapped[str] = mapped_column(String(128), unique=True, index=True, nullable=False)
    brand: Mapped[str] = mapped_column(String(128), nullable=False)
    model: Mapped[str] = mapped_column(String(128), nullable=False)
    specifications: Mapped[str | None] = mapped_column(Text, nullable=True)
    vendor: Mapped[str | None] = mapped_column(String(255), nullable=True)
    date_of_purchase: Mapped[date | None] = mapped_column(Date, nullable=True)
    warranty_end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[ItemStatus] = mapped_column(
        SAEnum(ItemStatus, values_callable=lambda e: [x.value for x in e]),
        default=ItemStatus.in_stock,
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    category: Mapped["Category"] = relationship(back_populates="items")
    issuance_logs: Mapped[list["IssuanceLog"]] = relationship(
        back_populates="item", order_by="IssuanceLog.issue_date"
    )
    documents: Mapped[list["ItemDocument"]] = relationship(back_populates="item")

    @property
    def category_name(self) -> str | None:
        return self.category.category_name if self.category else None
