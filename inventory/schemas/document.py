from datetime import datetime
from pydantic import BaseModel


class DocumentResponse(BaseModel):
    id: int
    item_id: int
    original_filename: str
    file_size: int
    mime_type: str
    description: str | None
    uploaded_by_user_id: int | None
    uploaded_by_username: str | None = None
    upload_date: datetime


class DocumentUploadResponse(BaseModel):
    message: str
    documents: list[DocumentResponse]


class DocumentDescriptionUpdate(BaseModel):
    description: str | None = None
