"""Pytest configuration for portfolio tests."""

import json

import pytest
from django.http import HttpResponse
from django.test import RequestFactory

from apps.core.stores import ContactStore, ContactStoreError, InMemoryContactStore

ALICE = {
    "name": "Alice",
    "email": "alice@example.com",
    "subject": "Hi",
    "message": "Hello there",
}


class BrokenContactStore(ContactStore):
    """Store whose backend is always unavailable."""

    def create(self, submission):
        raise ContactStoreError("backend unavailable")

    def list(self):
        raise ContactStoreError("backend unavailable")


class CrashingContactStore(ContactStore):
    """Store whose backend fails with an error it does not translate."""

    def create(self, submission):
        raise RuntimeError("unexpected backend failure")

    def list(self):
        raise RuntimeError("unexpected backend failure")


@pytest.fixture
def store() -> InMemoryContactStore:
    """A fresh, empty in-memory contact store."""
    return InMemoryContactStore()


@pytest.fixture
def broken_store() -> BrokenContactStore:
    return BrokenContactStore()


@pytest.fixture
def crashing_store() -> CrashingContactStore:
    return CrashingContactStore()


@pytest.fixture
def alice() -> dict[str, str]:
    return dict(ALICE)


@pytest.fixture
def post_json(rf: RequestFactory):
    """Build a JSON POST request and run it through a view."""

    def _post(view, payload, path: str = "/api/contact") -> HttpResponse:
        body = payload if isinstance(payload, (str, bytes)) else json.dumps(payload)
        request = rf.post(path, data=body, content_type="application/json")
        return view(request)

    return _post
