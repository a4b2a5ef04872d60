"""
URL patterns for the news & events admin pages.

Included under the ``/news-events/`` prefix.
"""
from django.urls import path

from .views import NewsEventDeleteView, NewsEventEditorView, NewsEventListView

app_name = "news_events"

urlpatterns = [
    path("", NewsEventListView.as_view(), name="list"),
    path("editor/", NewsEventEditorView.as_view(), name="editor"),
    path("<str:doc_id>/delete/", NewsEventDeleteView.as_view(), name="delete"),
]
