"""
Tests for the news & events service layer.

Covers the submit protocol in create and edit mode, attachment uploads,
newest-first listing and best-effort attachment cleanup on delete.
"""
from datetime import datetime, timezone

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from news_events.exceptions import DeletionError, DocumentNotFound, SubmissionError
from news_events.models import NewsEvent
from news_events.services import NewsEventService
from news_events.stores import DjangoObjectStore, OrmDocumentStore

from .conftest import FIXED_MILLIS, TickingClock
from .fakes import (
    FailingDeleteObjectStore,
    FailingInsertDocumentStore,
    FailingUploadObjectStore,
    UnreachableDocumentStore,
)


def _fields(**overrides):
    fields = {"id": "ev-1", "title": "Launch", "description": "", "imageUrl": "", "pdfUrl": ""}
    fields.update(overrides)
    return fields


@pytest.mark.django_db
def test_create_without_files(service):
    result = service.submit(_fields())

    assert result.created is True
    document = service.load(result.doc_id)
    assert document["id"] == "ev-1"
    assert document["title"] == "Launch"
    assert document["imageUrl"] == ""
    assert document["pdfUrl"] == ""
    assert document["createdAt"] is not None
    assert document["createdAt"] == document["updatedAt"]


@pytest.mark.django_db
def test_create_uploads_image_and_pdf(service, storage):
    image = SimpleUploadedFile("poster.png", b"\x89PNG...", content_type="image/png")
    pdf = SimpleUploadedFile("brochure.pdf", b"%PDF-1.4", content_type="application/pdf")

    result = service.submit(_fields(), image=image, pdf=pdf)

    document = service.load(result.doc_id)
    assert document["imageUrl"] == f"/media/images/{FIXED_MILLIS}_poster.png"
    assert document["pdfUrl"] == f"/media/pdfs/{FIXED_MILLIS}_brochure.pdf"
    assert storage.exists(f"images/{FIXED_MILLIS}_poster.png")
    assert storage.exists(f"pdfs/{FIXED_MILLIS}_brochure.pdf")


@pytest.mark.django_db
def test_edit_keeps_doc_id_and_created_at(service):
    created = service.submit(_fields(description="first"))
    before = service.load(created.doc_id)

    edited = service.submit(_fields(id="ev-2", title="Relaunch", description=""), doc_id=created.doc_id)

    after = service.load(created.doc_id)
    assert edited.created is False
    assert edited.doc_id == created.doc_id
    assert NewsEvent.objects.count() == 1
    assert after["createdAt"] == before["createdAt"]
    assert after["updatedAt"] > before["updatedAt"]
    assert after["id"] == "ev-2"
    assert after["title"] == "Relaunch"
    assert after["description"] == ""


@pytest.mark.django_db
def test_edit_without_files_preserves_existing_image_url(service):
    created = service.submit(_fields(imageUrl="https://x/img.png"))
    document = service.load(created.doc_id)

    service.submit(_fields(title="Changed", imageUrl=document["imageUrl"]), doc_id=created.doc_id)

    assert service.load(created.doc_id)["imageUrl"] == "https://x/img.png"


@pytest.mark.django_db
def test_repeated_identical_edits(service):
    created = service.submit(_fields(imageUrl="https://x/img.png", pdfUrl="https://x/doc.pdf"))
    fields = _fields(imageUrl="https://x/img.png", pdfUrl="https://x/doc.pdf")

    first = service.submit(fields, doc_id=created.doc_id)
    second = service.submit(fields, doc_id=created.doc_id)

    assert first.record["imageUrl"] == second.record["imageUrl"] == "https://x/img.png"
    assert first.record["pdfUrl"] == second.record["pdfUrl"] == "https://x/doc.pdf"
    assert second.record["updatedAt"] > first.record["updatedAt"]


@pytest.mark.django_db
def test_record_id_is_not_unique(service):
    service.submit(_fields())
    service.submit(_fields())

    assert NewsEvent.objects.filter(record_id="ev-1").count() == 2


@pytest.mark.django_db
def test_edit_of_missing_document_fails(service):
    with pytest.raises(SubmissionError) as excinfo:
        service.submit(_fields(), doc_id="7b0c5f2e-3f1e-4a53-9b1d-5d6f1b2c3a4e")

    assert isinstance(excinfo.value.__cause__, DocumentNotFound)
    assert excinfo.value.message.startswith("Failed to submit:")


@pytest.mark.django_db
def test_upload_failure_aborts_before_document_write(storage, clock):
    service = NewsEventService(OrmDocumentStore(), FailingUploadObjectStore(storage), clock=clock)
    image = SimpleUploadedFile("poster.png", b"data", content_type="image/png")

    with pytest.raises(SubmissionError, match="upload rejected"):
        service.submit(_fields(), image=image)

    assert NewsEvent.objects.count() == 0


@pytest.mark.django_db
def test_document_write_failure_keeps_uploaded_files(storage, clock):
    """Blobs uploaded before a failed document write are not rolled back."""
    service = NewsEventService(
        FailingInsertDocumentStore(), DjangoObjectStore(storage), clock=clock, millis=lambda: FIXED_MILLIS,
    )
    image = SimpleUploadedFile("poster.png", b"data", content_type="image/png")

    with pytest.raises(SubmissionError, match="document write rejected"):
        service.submit(_fields(), image=image)

    assert storage.exists(f"images/{FIXED_MILLIS}_poster.png")
    assert not NewsEvent.objects.exists()


@pytest.mark.django_db
def test_failed_edit_keeps_uploaded_files(service, storage):
    image = SimpleUploadedFile("poster.png", b"data", content_type="image/png")

    with pytest.raises(SubmissionError):
        service.submit(_fields(), image=image, doc_id="7b0c5f2e-3f1e-4a53-9b1d-5d6f1b2c3a4e")

    assert storage.exists(f"images/{FIXED_MILLIS}_poster.png")
    assert not NewsEvent.objects.exists()


@pytest.mark.django_db
def test_list_is_newest_first(service):
    t1 = datetime(2024, 1, 1, tzinfo=timezone.utc)
    t2 = datetime(2024, 6, 1, tzinfo=timezone.utc)
    t3 = datetime(2025, 1, 1, tzinfo=timezone.utc)
    for title, moment in (("middle", t2), ("oldest", t1), ("newest", t3)):
        NewsEvent.objects.create(record_id=title, title=title, created_at=moment, updated_at=moment)

    records = service.list_records()

    assert [r["title"] for r in records] == ["newest", "middle", "oldest"]
    assert all(r["docId"] for r in records)


@pytest.mark.django_db
def test_list_normalises_created_at():
    class ExportStore:
        def list_all(self):
            return [
                {"docId": "a", "title": "string", "createdAt": "2024-03-01T10:00:00Z"},
                {"docId": "b", "title": "exported", "createdAt": {"_seconds": 1735689600, "_nanoseconds": 0}},
                {"docId": "c", "title": "millis", "createdAt": 1704067200000},
            ]

    service = NewsEventService(ExportStore(), None)

    records = service.list_records()

    assert [r["title"] for r in records] == ["exported", "string", "millis"]
    assert all(isinstance(r["createdAt"], datetime) for r in records)


@pytest.mark.django_db
def test_delete_removes_document_and_attachments(service, storage):
    image = SimpleUploadedFile("poster.png", b"data", content_type="image/png")
    pdf = SimpleUploadedFile("brochure.pdf", b"%PDF", content_type="application/pdf")
    created = service.submit(_fields(), image=image, pdf=pdf)

    result = service.delete(created.doc_id)

    assert result.warnings == []
    assert service.load(created.doc_id) is None
    assert not storage.exists(f"images/{FIXED_MILLIS}_poster.png")
    assert not storage.exists(f"pdfs/{FIXED_MILLIS}_brochure.pdf")


@pytest.mark.django_db
def test_delete_proceeds_when_blob_delete_fails(storage):
    service = NewsEventService(OrmDocumentStore(), FailingDeleteObjectStore(storage), clock=TickingClock())
    created = service.submit(_fields(imageUrl="https://x/img.png", pdfUrl="https://x/doc.pdf"))

    result = service.delete(created.doc_id)

    assert service.load(created.doc_id) is None
    assert len(result.warnings) == 2
    assert "https://x/img.png" in result.warnings[0]
    assert all(r["docId"] != created.doc_id for r in service.list_records())


@pytest.mark.django_db
def test_delete_never_touches_blobs_on_other_hosts(service, storage):
    storage.save("images/1_a.png", SimpleUploadedFile("1_a.png", b"data"))
    created = service.submit(_fields(imageUrl="https://legacy.example.com/images/1_a.png"))

    result = service.delete(created.doc_id)

    assert storage.exists("images/1_a.png")
    assert service.load(created.doc_id) is None
    assert len(result.warnings) == 1
    assert "https://legacy.example.com/images/1_a.png" in result.warnings[0]


@pytest.mark.django_db
def test_delete_raises_when_document_store_fails(storage):
    service = NewsEventService(UnreachableDocumentStore(), FailingDeleteObjectStore(storage))

    with pytest.raises(DeletionError):
        service.delete("7b0c5f2e-3f1e-4a53-9b1d-5d6f1b2c3a4e")


def test_storage_path_uses_base_name():
    service = NewsEventService(None, None, millis=lambda: 42)

    assert service.storage_path("images", "../../etc/poster.png") == "images/42_poster.png"
    assert service.storage_path("pdfs", "") == "pdfs/42_upload"
