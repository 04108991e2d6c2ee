from sqlalchemy import ForeignKey, Integer, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from inventory.database import Base


class Stock(Base):
    __tablename__ = "stock"

    __table_args__ = (
        CheckConstraint("quantity_in_stock >= 0", name="ck_stock_quantity_non_negative"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    item_id: Mapped[int] = mapped_column(ForeignKey("items.id", ondelete="CASCADE"), nullable=False, index=True)
    quantity_in_stock: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    item: Mapped["Item"] = relationship()
