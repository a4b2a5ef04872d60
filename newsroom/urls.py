"""
URL configuration for the news & events admin backend.

The admin pages (record list, record editor) live under `/news-events/`,
account pages under `/accounts/`.  JSON endpoints are registered under the
`/api/` prefix via DRF's router.
"""

from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView
from rest_framework.routers import DefaultRouter
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from django.conf import settings
from django.conf.urls.static import static

from news_events.api import NewsEventViewSet
from newsroom.views import index
from users.api import SignUpAPIView


router = DefaultRouter()
router.register(r"news-events", NewsEventViewSet, basename="news-event")

urlpatterns = [
    path("", index, name="index"),
    path("admin/", admin.site.urls),

    path("news-events/", include("news_events.urls")),
    path("accounts/", include("users.urls")),

    path("api/", RedirectView.as_view(pattern_name="swagger-ui", permanent=False)),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),

    path("api/auth/sign-up/", SignUpAPIView.as_view(), name="api-sign-up"),
    path("api/", include(router.urls)),
]

if settings.DEBUG:
    # Only serve MEDIA_URL via Django if it's a local path (avoid trying to serve S3)
    if getattr(settings, "MEDIA_URL", "").startswith("/") and hasattr(settings, "MEDIA_ROOT"):
        urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
