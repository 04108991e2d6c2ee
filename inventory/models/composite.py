from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from inventory.database import Base

COMPONENT_FIELDS = ("desktop_id", "cpu_id", "lcd_id", "keyboard_id", "mouse_id", "speaker_id")


class CompositeItem(Base):
    """A bundle (e.g. a desktop set) whose columns point at its component items."""

    __tablename__ = "composite_items"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    desktop_id: Mapped[int] = mapped_column(ForeignKey("items.id"), nullable=False, index=True)
    cpu_id: Mapped[int | None] = mapped_column(ForeignKey("items.id"), nullable=True)
    lcd_id: Mapped[int | None] = mapped_column(ForeignKey("items.id"), nullable=True)
    keyboard_id: Mapped[int | None] = mapped_column(ForeignKey("items.id"), nullable=True)
    mouse_id: Mapped[int | None] = mapped_column(ForeignKey("items.id"), nullable=True)
    speaker_id: Mapped[int | None] = mapped_column(ForeignKey("items.id"), nullable=True)
