"""
Project package for the news & events admin backend.

Settings live in ``newsroom.settings`` (split into base/dev/prod/test),
the root URL configuration in ``newsroom.urls``.
"""
