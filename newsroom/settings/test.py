"""
Test settings.

SQLite in memory, in-memory file storage and the local account service,
so the suite runs without Postgres, S3 or Cognito.
"""
from .base import *  # noqa

DEBUG = False
SECRET_KEY = "test-secret"
ALLOWED_HOSTS = ["testserver", "localhost"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.InMemoryStorage"},
    "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"},
}
MEDIA_URL = "/media/"

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

COGNITO_REGION = ""
COGNITO_USER_POOL_ID = ""
COGNITO_APP_CLIENT_ID = ""
COGNITO_APP_CLIENT_SECRET = ""

NEWS_EVENTS = {
    **NEWS_EVENTS,  # noqa: F405
    "AUTH_SERVICE": "users.auth.LocalAuthService",
    "REDIRECT_DELAY_SECONDS": 0,
}

# application records reach the root logger, where pytest's caplog listens
for _name in ("news_events", "users"):
    LOGGING["loggers"][_name] = {"level": "DEBUG", "propagate": True}  # noqa: F405
