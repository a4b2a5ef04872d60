from django.conf import settings
from django.shortcuts import redirect


def index(request):
    # A public site is configured? the site root belongs to it
    if settings.FRONTEND_URL:
        return redirect(settings.FRONTEND_URL)
    # Otherwise the site root is the news & events list
    return redirect("news_events:list")
