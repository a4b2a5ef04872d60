"""
Production settings for the news & events admin backend.

Extends the base settings by disabling debug mode, enforcing secure
cookies, and enabling HTTP Strict Transport Security.  The editor and
sign-up pages post forms from the browser, so deployments must list their
public origins in ``CSRF_TRUSTED_ORIGINS`` and set a real secret key.
"""
from django.core.exceptions import ImproperlyConfigured

from .base import *  # noqa

DEBUG = False

if SECRET_KEY == "dev-insecure":  # noqa: F405
    raise ImproperlyConfigured("DJANGO_SECRET_KEY must be set in production")
if not CSRF_TRUSTED_ORIGINS:  # noqa: F405
    raise ImproperlyConfigured("CSRF_TRUSTED_ORIGINS must list the admin's public origins in production")

SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_SSL_REDIRECT = True

SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True
