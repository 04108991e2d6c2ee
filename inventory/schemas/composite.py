from pydantic import BaseModel


class CompositeItemCreate(BaseModel):
    desktop_id: int
    cpu_id: int | None = None
    lcd_id: int | None = None
    keyboard_id: int | None = None
    mouse_id: int | None = None
    speaker_id: int | None = None


class CompositeItemResponse(CompositeItemCreate):
    id: int

    model_config = {"from_attributes": True}
