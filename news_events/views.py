"""
Admin pages for news & events.

``NewsEventListView`` shows every record newest first, ``NewsEventEditorView``
creates a record or, with ``?edit=true&docId=<docId>``, overwrites one, and
``NewsEventDeleteView`` removes a record together with its attachments.

These pages carry no login requirement of their own.  Sign-in happens on
the hosted login page at ``settings.LOGIN_URL`` and access to the pages is
restricted in front of the app (the hosted login and the deployment's
allowed origins).  Sign Out ends whatever Django session exists and revokes
Cognito tokens.  The JSON API, reachable by any bearer-token client, does
its own ``IsAuthenticated`` check.
"""
import logging

from django.conf import settings
from django.contrib import messages
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views import View

from .exceptions import DeletionError, SubmissionError
from .forms import NewsEventForm
from .services import build_news_event_service

logger = logging.getLogger(__name__)


class NewsEventListView(View):
    template_name = "news_events/list.html"

    def get(self, request):
        service = build_news_event_service()
        try:
            records = service.list_records()
        except Exception:
            logger.exception("Error fetching uploads")
            messages.error(request, "Failed to load uploads")
            records = []
        return render(request, self.template_name, {"records": records})


class NewsEventDeleteView(View):
    http_method_names = ["post"]

    def post(self, request, doc_id):
        try:
            result = build_news_event_service().delete(doc_id)
        except DeletionError as exc:
            messages.error(request, exc.message)
        else:
            for warning in result.warnings:
                messages.warning(request, warning)
        return redirect("news_events:list")


class NewsEventEditorView(View):
    template_name = "news_events/editor.html"
    submitted_template_name = "news_events/submitted.html"

    @staticmethod
    def edit_doc_id(request):
        """The docId being edited, or None in create mode."""
        if request.GET.get("edit") != "true":
            return None
        return request.GET.get("docId") or None

    def get(self, request):
        doc_id = self.edit_doc_id(request)
        initial, error = {}, ""
        if doc_id:
            try:
                document = build_news_event_service().load(doc_id)
            except Exception:
                logger.exception("Error fetching document %s", doc_id)
                error = "Failed to load document"
            else:
                if document:
                    initial = NewsEventForm.initial_from_document(document)
        return self.render_form(request, NewsEventForm(initial=initial), doc_id, error)

    def post(self, request):
        doc_id = self.edit_doc_id(request)
        form = NewsEventForm(request.POST, request.FILES)
        if not form.is_valid():
            return self.render_form(request, form, doc_id)

        try:
            result = build_news_event_service().submit(
                form.to_fields(),
                image=form.cleaned_data.get("image"),
                pdf=form.cleaned_data.get("pdf"),
                doc_id=doc_id,
            )
        except SubmissionError as exc:
            return self.render_form(request, form, doc_id, exc.message)

        return render(request, self.submitted_template_name, {
            "result": result,
            "redirect_url": reverse("news_events:list"),
            "delay": settings.NEWS_EVENTS.get("REDIRECT_DELAY_SECONDS", 1),
        })

    def render_form(self, request, form, doc_id, error=""):
        return render(request, self.template_name, {
            "form": form,
            "edit_mode": doc_id is not None,
            "doc_id": doc_id,
            "error": error,
        })
