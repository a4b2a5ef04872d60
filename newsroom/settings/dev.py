"""
Development settings for the news & events admin backend.

Extends the base settings by enabling debugging and allowing all hosts.  Do
not use these settings in production.
"""
from .base import *  # noqa

# Development toggles
DEBUG = True
ALLOWED_HOSTS = ["*", "127.0.0.1", "localhost"]
CSRF_TRUSTED_ORIGINS = ["http://127.0.0.1:8000", "http://localhost:8000"]

LOGGING["root"]["level"] = "DEBUG"  # noqa: F405
LOGGING["loggers"]["news_events"]["level"] = "DEBUG"  # noqa: F405
LOGGING["loggers"]["users"]["level"] = "DEBUG"  # noqa: F405
