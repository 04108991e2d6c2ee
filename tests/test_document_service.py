"""Document file handling around the database commit."""
import pytest
from sqlalchemy.exc import OperationalError

from inventory.config import settings
from inventory.models.category import Category
from inventory.models.document import ItemDocument
from inventory.models.item import Item
import inventory.services.document_service as svc


@pytest.fixture
def stored_doc(db, tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(tmp_path))
    category = Category(category_name="Laptop")
    db.add(category)
    db.flush()
    item = Item(category_id=category.id, serial_number="DOC-1", brand="Dell", model="XPS")
    db.add(item)
    db.flush()

    path = svc.documents_dir() / "documents-abc123.pdf"
    path.write_bytes(b"%PDF-1.4 receipt")
    doc = ItemDocument(
        item_id=item.id,
        original_filename="receipt.pdf",
        stored_filename=path.name,
        file_path=str(path),
        file_size=path.stat().st_size,
        mime_type="application/pdf",
    )
    db.add(doc)
    db.commit()
    return doc, path


def _failing_commit():
    raise OperationalError("COMMIT", {}, Exception("database is locked"))


def test_delete_keeps_file_when_commit_fails(db, stored_doc, monkeypatch):
    doc, path = stored_doc
    doc_id = doc.id
    monkeypatch.setattr(db, "commit", _failing_commit)

    with pytest.raises(OperationalError):
        svc.delete_document(db, doc_id)

    assert path.exists()
    assert db.get(ItemDocument, doc_id) is not None


def test_delete_removes_row_and_file(db, stored_doc):
    doc, path = stored_doc
    doc_id = doc.id
    svc.delete_document(db, doc_id)

    assert not path.exists()
    assert db.get(ItemDocument, doc_id) is None


def test_delete_tolerates_missing_file(db, stored_doc):
    doc, path = stored_doc
    doc_id = doc.id
    path.unlink()
    svc.delete_document(db, doc_id)
    assert db.get(ItemDocument, doc_id) is None
