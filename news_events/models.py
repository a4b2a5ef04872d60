"""
Models for the news & events app.

``NewsEvent`` is one content record: a user-supplied ``record_id`` (shown
as "ID" in the admin pages, never used as a key), a title, an optional
description and optional image/PDF URLs pointing into object storage.
The store-assigned ``doc_id`` is the real primary key; the list page keys
edit and delete off it.  No uniqueness is enforced on ``record_id``.
"""
import uuid

from django.db import models
from django.utils import timezone


class NewsEvent(models.Model):
    """A news or event item managed from the admin pages."""

    doc_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    record_id = models.CharField(max_length=255, help_text="Business identifier entered by the editor")
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    image_url = models.CharField(max_length=1024, blank=True)
    pdf_url = models.CharField(max_length=1024, blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "uploads"
        ordering = ["-created_at"]
        verbose_name = "news/event"
        verbose_name_plural = "news & events"

    def __str__(self) -> str:
        return f"{self.record_id}: {self.title}"
