from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session
from inventory.database import get_db
from inventory.models.user import User
from inventory.schemas.common import Message
from inventory.schemas.document import DocumentResponse, DocumentUploadResponse, DocumentDescriptionUpdate
from inventory.security import get_current_user
import inventory.services.document_service as svc

router = APIRouter(prefix="/api/documents", tags=["documents"])


@router.post("/items/{item_id}/documents", response_model=DocumentUploadResponse, status_code=201)
def upload_documents(
    item_id: int,
    documents: list[UploadFile] = File(...),
    description: str | None = Form(None),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return svc.upload_documents(db, item_id, documents, description=description, user_id=user.id)


@router.get("/items/{item_id}/documents", response_model=list[DocumentResponse])
def list_item_documents(item_id: int, db: Session = Depends(get_db), _=Depends(get_current_user)):
    return svc.get_item_documents(db, item_id)


@router.get("/documents/{document_id}/download")
def download_document(document_id: int, db: Session = Depends(get_db), _=Depends(get_current_user)):
    doc = svc.get_document_file(db, document_id)
    return FileResponse(doc.file_path, media_type=doc.mime_type, filename=doc.original_filename)


@router.put("/documents/{document_id}/description", response_model=DocumentResponse)
def update_description(
    document_id: int,
    data: DocumentDescriptionUpdate,
    db: Session = Depends(get_db),
    _=Depends(get_current_user),
):
    return svc.update_description(db, document_id, data.description)


@router.delete("/documents/{document_id}", response_model=Message)
def delete_document(document_id: int, db: Session = Depends(get_db), _=Depends(get_current_user)):
    svc.delete_document(db, document_id)
    return {"message": "Document deleted successfully"}
