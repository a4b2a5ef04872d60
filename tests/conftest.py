"""
Common test fixtures.

Provides a news & events service wired to the real ORM store and an
in-memory object store with deterministic clocks, plus logged-in page and
API clients.
"""
from datetime import datetime, timedelta, timezone

import pytest
from django.contrib.auth.models import User
from django.core.files.storage import InMemoryStorage
from rest_framework.test import APIClient

from news_events.services import NewsEventService
from news_events.stores import DjangoObjectStore, OrmDocumentStore

FIXED_MILLIS = 1700000000000


class TickingClock:
    """Returns a strictly increasing aware datetime on every call."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.current = start or datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        value = self.current
        self.current += self.step
        return value


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def storage():
    return InMemoryStorage(base_url="/media/")


@pytest.fixture
def service(db, storage, clock):
    return NewsEventService(
        OrmDocumentStore(),
        DjangoObjectStore(storage),
        clock=clock,
        millis=lambda: FIXED_MILLIS,
    )


@pytest.fixture
def user(db):
    """Create a test user."""
    return User.objects.create_user(username="editor@example.com", email="editor@example.com", password="pass12345")


@pytest.fixture
def auth_client(client, user):
    """Django test client with a logged-in session."""
    client.force_login(user)
    return client


@pytest.fixture
def api_client(user):
    api = APIClient()
    api.force_authenticate(user=user)
    return api
