"""
Backend collaborators of the news & events service.

``OrmDocumentStore`` keeps one document per record in the ``uploads``
table and hands documents around as plain dicts in their published shape
(``docId``, ``id``, ``title``, ``description``, ``imageUrl``, ``pdfUrl``,
``createdAt``, ``updatedAt``).  ``DjangoObjectStore`` wraps a Django
``Storage`` (S3 through django-storages in production) and addresses blobs
by path, returning public URLs.

Both are instantiated per request by ``services.build_news_event_service``
from the dotted paths in ``settings.NEWS_EVENTS``.
"""
import logging
import uuid
from urllib.parse import unquote, urlparse

from django.conf import settings
from django.core.files.storage import default_storage

from .exceptions import DocumentNotFound
from .models import NewsEvent

logger = logging.getLogger(__name__)

# document key -> model field
FIELD_MAP = {
    "id": "record_id",
    "title": "title",
    "description": "description",
    "imageUrl": "image_url",
    "pdfUrl": "pdf_url",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}
TIMESTAMP_FIELDS = {"created_at", "updated_at"}


def _as_pk(doc_id):
    """Return ``doc_id`` as a UUID, or None when it cannot address a row."""
    try:
        return uuid.UUID(str(doc_id))
    except (TypeError, ValueError):
        return None


class OrmDocumentStore:
    """Document store over the ``uploads`` table."""

    model = NewsEvent

    def insert(self, data: dict) -> str:
        obj = self.model.objects.create(**self._to_fields(data))
        logger.info("Document written with docId=%s", obj.doc_id)
        return str(obj.doc_id)

    def get(self, doc_id) -> dict | None:
        pk = _as_pk(doc_id)
        if pk is None:
            return None
        obj = self.model.objects.filter(pk=pk).first()
        return self.to_document(obj) if obj else None

    def overwrite(self, doc_id, data: dict) -> None:
        """Write every field present in ``data``; the document must exist."""
        pk = _as_pk(doc_id)
        updated = self.model.objects.filter(pk=pk).update(**self._to_fields(data)) if pk else 0
        if not updated:
            raise DocumentNotFound(doc_id)
        logger.info("Document updated docId=%s", doc_id)

    def delete(self, doc_id) -> None:
        pk = _as_pk(doc_id)
        if pk is None:
            return
        self.model.objects.filter(pk=pk).delete()
        logger.info("Document deleted docId=%s", doc_id)

    def list_all(self) -> list[dict]:
        # whole collection in storage order; callers sort
        return [self.to_document(obj) for obj in self.model.objects.order_by()]

    @staticmethod
    def to_document(obj: NewsEvent) -> dict:
        return {
            "docId": str(obj.doc_id),
            "id": obj.record_id,
            "title": obj.title,
            "description": obj.description,
            "imageUrl": obj.image_url,
            "pdfUrl": obj.pdf_url,
            "createdAt": obj.created_at,
            "updatedAt": obj.updated_at,
        }

    @staticmethod
    def _to_fields(data: dict) -> dict:
        fields = {}
        for key, field in FIELD_MAP.items():
            if key not in data:
                continue
            value = data[key]
            if value is None and field not in TIMESTAMP_FIELDS:
                value = ""
            fields[field] = value
        return fields


class DjangoObjectStore:
    """Object store over a Django ``Storage`` backend."""

    def __init__(self, storage=None):
        self.storage = storage if storage is not None else default_storage

    def upload(self, path: str, file) -> str:
        """Store ``file`` at ``path``; returns the name the backend actually used."""
        stored = self.storage.save(path, file)
        logger.info("Stored file at %s", stored)
        return stored

    def public_url(self, path: str) -> str:
        return self.storage.url(path)

    def delete(self, url_or_path: str) -> None:
        path = self.path_from_url(url_or_path)
        self.storage.delete(path)
        logger.info("Deleted stored file %s", path)

    def own_hosts(self) -> set[str]:
        """Hosts whose URLs point into this storage."""
        hosts = {
            urlparse(getattr(settings, "MEDIA_URL", "") or "").netloc,
            getattr(settings, "AWS_S3_CUSTOM_DOMAIN", "") or "",
            getattr(self.storage, "custom_domain", "") or "",
        }
        return {host.lower() for host in hosts if host}

    def path_from_url(self, url_or_path: str) -> str:
        """
        Map a public URL produced by ``public_url`` back to a storage path.

        Bare storage paths pass through.  URLs on any other host, or local
        URLs outside ``MEDIA_URL``, raise ``ValueError``.
        """
        value = url_or_path.strip()
        base = getattr(settings, "MEDIA_URL", "") or ""
        if base and value.startswith(base):
            path = value[len(base):]
        elif "://" in value or value.startswith("//"):
            parsed = urlparse(value)
            if parsed.netloc.lower() not in self.own_hosts():
                raise ValueError(f"{value} is not stored in this object store")
            path = parsed.path
        elif value.startswith("/"):
            raise ValueError(f"{value} is outside {base or 'MEDIA_URL'}")
        else:
            path = value
        return unquote(path.split("?", 1)[0]).lstrip("/")
