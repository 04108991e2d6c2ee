import logging
import os
import uuid
from pathlib import Path

from fastapi import HTTPException, UploadFile
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inventory.config import settings
from inventory.models.document import ItemDocument
from inventory.models.item import Item

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES = {
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "image/jpeg",
    "image/png",
    "image/gif",
    "text/plain",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}

_CHUNK_SIZE = 1024 * 1024


def documents_dir() -> Path:
    path = Path(settings.UPLOAD_DIR) / "documents"
    path.mkdir(parents=True, exist_ok=True)
    return path


def _to_response_dict(doc: ItemDocument) -> dict:
    return {
        "id": doc.id,
        "item_id": doc.item_id,
        "original_filename": doc.original_filename,
        "file_size": doc.file_size,
        "mime_type": doc.mime_type,
        "description": doc.description,
        "uploaded_by_user_id": doc.uploaded_by_user_id,
        "uploaded_by_username": doc.uploaded_by_user.username if doc.uploaded_by_user else None,
        "upload_date": doc.upload_date,
    }


def _mime_type(upload: UploadFile) -> str:
    return (upload.content_type or "").split(";")[0].strip().lower()


def _store(upload: UploadFile, target_dir: Path) -> tuple[str, Path, int]:
    ext = Path(upload.filename or "").suffix.lower()
    stored_name = f"documents-{uuid.uuid4().hex}{ext}"
    target = target_dir / stored_name
    size = 0
    with open(target, "wb") as buffer:
        while chunk := upload.file.read(_CHUNK_SIZE):
            size += len(chunk)
            if size > settings.MAX_UPLOAD_SIZE:
                buffer.close()
                target.unlink(missing_ok=True)
                raise HTTPException(
                    status_code=400,
                    detail=f"File '{upload.filename}' exceeds the {settings.MAX_UPLOAD_SIZE // (1024 * 1024)}MB limit",
                )
            buffer.write(chunk)
    return stored_name, target, size


def upload_documents(
    db: Session,
    item_id: int,
    files: list[UploadFile],
    description: str | None = None,
    user_id: int | None = None,
) -> dict:
    if not db.get(Item, item_id):
        raise HTTPException(status_code=404, detail="Item not found")
    files = [f for f in files if f.filename]
    if not files:
        raise HTTPException(status_code=400, detail="No files uploaded")
    if len(files) > settings.MAX_UPLOAD_FILES:
        raise HTTPException(status_code=400, detail=f"At most {settings.MAX_UPLOAD_FILES} files per upload")
    for upload in files:
        if _mime_type(upload) not in ALLOWED_MIME_TYPES:
            raise HTTPException(
                status_code=400,
                detail="Invalid file type. Only PDF, Word, Excel, images, and text files are allowed.",
            )

    target_dir = documents_dir()
    written: list[Path] = []
    docs: list[ItemDocument] = []
    try:
        for upload in files:
            stored_name, path, size = _store(upload, target_dir)
            written.append(path)
            doc = ItemDocument(
                item_id=item_id,
                original_filename=upload.filename,
                stored_filename=stored_name,
                file_path=str(path),
                file_size=size,
                mime_type=_mime_type(upload),
                description=description or None,
                uploaded_by_user_id=user_id,
            )
            db.add(doc)
            docs.append(doc)
        db.commit()
    except Exception:
        db.rollback()
        for path in written:
            path.unlink(missing_ok=True)
        raise

    for doc in docs:
        db.refresh(doc)
    logger.info("AUDIT: %d document(s) uploaded for item %s by user %s", len(docs), item_id, user_id)
    return {
        "message": f"{len(docs)} document(s) uploaded successfully",
        "documents": [_to_response_dict(d) for d in docs],
    }


def get_item_documents(db: Session, item_id: int) -> list[dict]:
    docs = db.scalars(
        select(ItemDocument)
        .where(ItemDocument.item_id == item_id)
        .order_by(ItemDocument.upload_date.desc(), ItemDocument.id.desc())
    ).all()
    return [_to_response_dict(d) for d in docs]


def get_document(db: Session, document_id: int) -> ItemDocument:
    doc = db.get(ItemDocument, document_id)
    if not doc:
        raise HTTPException(status_code=404, detail="Document not found")
    return doc


def get_document_file(db: Session, document_id: int) -> ItemDocument:
    doc = get_document(db, document_id)
    if not os.path.exists(doc.file_path):
        raise HTTPException(status_code=404, detail="File not found on server")
    return doc


def delete_document(db: Session, document_id: int) -> None:
    doc = get_document(db, document_id)
    file_path = Path(doc.file_path)
    db.delete(doc)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    # File goes only after the row is committed away
    file_path.unlink(missing_ok=True)


def update_description(db: Session, document_id: int, description: str | None) -> dict:
    doc = get_document(db, document_id)
    doc.description = description
    db.commit()
    db.refresh(doc)
    return _to_response_dict(doc)
