"""
Initial migration for the news & events app.

Creates the ``uploads`` table holding one row per news/event record.
"""
import uuid

import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="NewsEvent",
            fields=[
                ("doc_id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("record_id", models.CharField(help_text="Business identifier entered by the editor", max_length=255)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("image_url", models.CharField(blank=True, max_length=1024)),
                ("pdf_url", models.CharField(blank=True, max_length=1024)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "verbose_name": "news/event",
                "verbose_name_plural": "news & events",
                "db_table": "uploads",
                "ordering": ["-created_at"],
            },
        ),
    ]
