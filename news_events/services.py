"""
Record workflows for the news & events admin.

``NewsEventService`` implements the create/edit submit protocol, the
newest-first listing and the delete-with-attachments protocol on top of a
document store and an object store passed in by the caller.  Views build
one per request through ``build_news_event_service()``, which resolves the
collaborators from ``settings.NEWS_EVENTS``.

Submits are strictly sequential: uploads finish before the document write
because the write needs their URLs.  Nothing is retried and uploaded blobs
are not removed when a later step fails.  Concurrent edits of the same
document are last-write-wins.
"""
import logging
import os
import time
from dataclasses import dataclass, field

from django.conf import settings
from django.utils import timezone
from django.utils.module_loading import import_string

from .exceptions import DeletionError, SubmissionError
from .utils import normalize_timestamp

logger = logging.getLogger(__name__)

IMAGE_PREFIX = "images"
PDF_PREFIX = "pdfs"
RECORD_FIELDS = ("id", "title", "description", "imageUrl", "pdfUrl")


def epoch_millis() -> int:
    return int(time.time() * 1000)


@dataclass
class SubmitResult:
    doc_id: str
    record: dict
    created: bool


@dataclass
class DeleteResult:
    """Outcome of a delete; ``warnings`` lists attachments left behind."""

    doc_id: str
    warnings: list[str] = field(default_factory=list)


class NewsEventService:
    def __init__(self, documents, files, *, clock=timezone.now, millis=epoch_millis):
        self.documents = documents
        self.files = files
        self.clock = clock
        self.millis = millis

    def load(self, doc_id) -> dict | None:
        """Fetch one document for the editor; store errors propagate."""
        return self.documents.get(doc_id)

    def list_records(self) -> list[dict]:
        """All documents with ``createdAt`` normalised, newest first."""
        records = []
        for document in self.documents.list_all():
            record = dict(document)
            record["createdAt"] = normalize_timestamp(document.get("createdAt"))
            records.append(record)
        # sort is stable, ties keep store order
        records.sort(key=lambda r: r["createdAt"], reverse=True)
        return records

    def storage_path(self, kind: str, filename: str) -> str:
        name = os.path.basename(filename or "") or "upload"
        return f"{kind}/{self.millis()}_{name}"

    def submit(self, fields, *, image=None, pdf=None, doc_id=None) -> SubmitResult:
        """
        Save a record from editor input.

        ``fields`` carries ``id``, ``title``, ``description`` and the current
        ``imageUrl``/``pdfUrl``.  A new ``image``/``pdf`` file replaces the
        matching URL, otherwise the current URL is kept.  With ``doc_id`` the
        existing document is overwritten (``createdAt`` untouched), without it
        a new document is inserted with ``createdAt == updatedAt``.

        Any failure raises ``SubmissionError``.
        """
        try:
            image_url = fields.get("imageUrl") or ""
            pdf_url = fields.get("pdfUrl") or ""
            if image is not None:
                image_url = self._upload(IMAGE_PREFIX, image)
            if pdf is not None:
                pdf_url = self._upload(PDF_PREFIX, pdf)

            now = self.clock()
            record = {
                "id": fields.get("id") or "",
                "title": fields.get("title") or "",
                "description": fields.get("description") or "",
                "imageUrl": image_url,
                "pdfUrl": pdf_url,
                "updatedAt": now,
            }
            if doc_id:
                self.documents.overwrite(doc_id, record)
                created = False
            else:
                record["createdAt"] = now
                doc_id = self.documents.insert(record)
                created = True
        except Exception as exc:
            logger.exception("Error submitting news/event (docId=%s)", doc_id)
            raise SubmissionError(f"Failed to submit: {exc}") from exc

        return SubmitResult(doc_id=str(doc_id), record=record, created=created)

    def delete(self, doc_id) -> DeleteResult:
        """
        Delete a record and, best effort, its image and PDF.

        Attachment failures are logged and returned as warnings; the document
        is deleted regardless.  Failures reading or deleting the document
        raise ``DeletionError``.
        """
        result = DeleteResult(doc_id=str(doc_id))
        try:
            document = self.documents.get(doc_id) or {}
        except Exception as exc:
            logger.exception("Error loading document %s for delete", doc_id)
            raise DeletionError(f"Failed to delete: {exc}") from exc

        self._discard(document.get("imageUrl"), result.warnings)
        self._discard(document.get("pdfUrl"), result.warnings)

        try:
            self.documents.delete(doc_id)
        except Exception as exc:
            logger.exception("Error deleting document %s", doc_id)
            raise DeletionError(f"Failed to delete: {exc}") from exc
        return result

    def _upload(self, kind: str, file) -> str:
        stored = self.files.upload(self.storage_path(kind, getattr(file, "name", "")), file)
        url = self.files.public_url(stored)
        logger.info("Uploaded %s: %s", kind, url)
        return url

    def _discard(self, url, warnings: list) -> None:
        if not url:
            return
        try:
            self.files.delete(url)
        except Exception as exc:
            logger.warning("Could not delete stored file %s: %s", url, exc)
            warnings.append(f"Could not delete {url}: {exc}")


def build_news_event_service(**kwargs) -> NewsEventService:
    conf = settings.NEWS_EVENTS
    documents = import_string(conf["DOCUMENT_STORE"])()
    files = import_string(conf["OBJECT_STORE"])()
    return NewsEventService(documents, files, **kwargs)
