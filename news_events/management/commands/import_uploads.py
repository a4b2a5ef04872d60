import json
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from news_events.stores import OrmDocumentStore
from news_events.utils import normalize_timestamp


class Command(BaseCommand):
    help = "Import news/event documents from a JSON export into the uploads table"

    def add_arguments(self, parser):
        parser.add_argument("--file", required=True, help="Path to a JSON array (or {\"uploads\": [...]})")
        parser.add_argument("--dry-run", action="store_true", help="Validate and count without writing")

    def handle(self, *args, **opts):
        path = Path(opts["file"])
        if not path.exists():
            raise CommandError(f"File not found: {path}")

        with path.open("r", encoding="utf-8") as f:
            try:
                payload = json.load(f)
            except json.JSONDecodeError as exc:
                raise CommandError(f"Invalid JSON in {path}: {exc}") from exc

        documents = payload.get("uploads", []) if isinstance(payload, dict) else payload
        if not isinstance(documents, list):
            raise CommandError("Expected a list of documents")

        to_insert, skipped = [], 0
        for index, raw in enumerate(documents):
            record = self._to_record(raw)
            if record is None:
                skipped += 1
                self.stderr.write(self.style.WARNING(f"Skipping document #{index}: missing id/title or bad timestamp"))
                continue
            to_insert.append(record)

        if opts["dry_run"]:
            self.stdout.write(self.style.SUCCESS(f"Would import {len(to_insert)} documents ({skipped} skipped)"))
            return

        store = OrmDocumentStore()
        with transaction.atomic():
            for record in to_insert:
                store.insert(record)

        self.stdout.write(self.style.SUCCESS(f"Imported {len(to_insert)} documents ({skipped} skipped)"))

    @staticmethod
    def _to_record(raw):
        if not isinstance(raw, dict):
            return None
        record_id = str(raw.get("id") or "").strip()
        title = str(raw.get("title") or "").strip()
        if not record_id or not title:
            return None
        try:
            created_at = normalize_timestamp(raw.get("createdAt"))
            updated_at = normalize_timestamp(raw.get("updatedAt"), default=created_at)
        except (TypeError, ValueError):
            return None
        return {
            "id": record_id,
            "title": title,
            "description": raw.get("description") or "",
            "imageUrl": raw.get("imageUrl") or "",
            "pdfUrl": raw.get("pdfUrl") or "",
            "createdAt": created_at,
            "updatedAt": updated_at,
        }
