from django.contrib import admin

from .models import NewsEvent


@admin.register(NewsEvent)
class NewsEventAdmin(admin.ModelAdmin):
    list_display = ("record_id", "title", "created_at", "updated_at")
    search_fields = ("record_id", "title", "description")
    readonly_fields = ("doc_id", "created_at", "updated_at")
    ordering = ("-created_at",)
