import json
from datetime import datetime, timezone
from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from news_events.models import NewsEvent


def _write(tmp_path, payload):
    path = tmp_path / "uploads.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


@pytest.mark.django_db
def test_imports_export_documents(tmp_path):
    path = _write(tmp_path, {"uploads": [
        {"id": "a", "title": "Seconds", "createdAt": {"_seconds": 1704067200, "_nanoseconds": 0}},
        {"id": "b", "title": "Millis", "createdAt": 1735689600000, "imageUrl": "https://x/img.png"},
        {"id": "c", "title": "ISO", "createdAt": "2024-06-01T08:00:00Z", "updatedAt": "2024-06-02T08:00:00Z"},
    ]})
    out = StringIO()

    call_command("import_uploads", file=path, stdout=out)

    assert "Imported 3 documents (0 skipped)" in out.getvalue()
    a = NewsEvent.objects.get(record_id="a")
    assert a.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert a.updated_at == a.created_at
    b = NewsEvent.objects.get(record_id="b")
    assert b.created_at == datetime(2025, 1, 1, tzinfo=timezone.utc)
    assert b.image_url == "https://x/img.png"
    c = NewsEvent.objects.get(record_id="c")
    assert c.updated_at == datetime(2024, 6, 2, 8, tzinfo=timezone.utc)


@pytest.mark.django_db
def test_skips_incomplete_documents(tmp_path):
    path = _write(tmp_path, [
        {"id": "a", "title": "Good", "createdAt": "2024-01-01"},
        {"title": "No id"},
        {"id": "c", "title": "Bad date", "createdAt": "yesterday"},
        "not a document",
    ])
    out, err = StringIO(), StringIO()

    call_command("import_uploads", file=path, stdout=out, stderr=err)

    assert "Imported 1 documents (3 skipped)" in out.getvalue()
    assert "Skipping document #1" in err.getvalue()
    assert list(NewsEvent.objects.values_list("record_id", flat=True)) == ["a"]


@pytest.mark.django_db
def test_dry_run_writes_nothing(tmp_path):
    path = _write(tmp_path, [{"id": "a", "title": "Good"}])
    out = StringIO()

    call_command("import_uploads", file=path, dry_run=True, stdout=out)

    assert "Would import 1 documents (0 skipped)" in out.getvalue()
    assert not NewsEvent.objects.exists()


def test_missing_file(tmp_path):
    with pytest.raises(CommandError, match="File not found"):
        call_command("import_uploads", file=str(tmp_path / "nope.json"))


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CommandError, match="Invalid JSON"):
        call_command("import_uploads", file=str(path))
