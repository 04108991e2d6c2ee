from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from inventory.database import Base

# Accessory categories offered in the bulk "issue peripherals" flow
PERIPHERAL_CATEGORIES = (
    "Mouse", "Keyboard", "Speaker", "Monitor", "Headphone",
    "Webcam", "Microphone", "Printer", "Scanner", "USB Drive",
    "External Hard Drive", "Network Cable", "Power Cable", "Adapter",
)


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    category_name: Mapped[str] = mapped_column(String(128), unique=True, nullable=False)

    items: Mapped[list["Item"]] = relationship(back_populates="category")
