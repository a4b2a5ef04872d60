from django.apps import AppConfig


class NewsEventsConfig(AppConfig):
    """
    Configuration for the news & events app.

    Records are stored in the ``uploads`` table; their images and PDFs live
    in the configured object storage and are referenced by URL only.
    """
    default_auto_field = "django.db.models.BigAutoField"
    name = "news_events"
    verbose_name = "News & Events"
