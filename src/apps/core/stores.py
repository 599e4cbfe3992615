"""
Contact message stores.

A store holds every accepted contact message and exposes two operations:
``create`` assigns an identifier and timestamp to a validated submission,
``list`` returns the stored messages in insertion order. Stores are
constructed explicitly (see ``build_contact_store``) and handed to the API
views, so each test can work against its own instance.
"""

import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from django.conf import settings
from django.db import DatabaseError
from django.utils import timezone
from django.utils.module_loading import import_string

from .models import ContactMessage
from .validation import ContactSubmission

logger = logging.getLogger(__name__)


class ContactStoreError(Exception):
    """Raised when a store cannot read or write contact messages."""


@dataclass(frozen=True)
class StoredContact:
    """A contact message as held by a store."""

    id: int
    name: str
    email: str
    subject: str
    message: str
    submitted_at: datetime

    def as_dict(self) -> dict[str, Any]:
        """Return the JSON representation used by the contacts API."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "subject": self.subject,
            "message": self.message,
            "submittedAt": self.submitted_at,
        }


class ContactStore(ABC):
    """Interface shared by all contact stores."""

    @abstractmethod
    def create(self, submission: ContactSubmission) -> StoredContact:
        """Assign an id and timestamp to ``submission`` and keep it."""

    @abstractmethod
    def list(self) -> list[StoredContact]:
        """Return every stored message in insertion order."""

    def count(self) -> int:
        return len(self.list())


class InMemoryContactStore(ContactStore):
    """
    Keeps messages in a list for the lifetime of the process.

    Identifiers start at 1 and increase by one per message. The lock makes
    concurrent ``create`` calls safe under threaded servers.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._messages: list[StoredContact] = []
        self._next_id = 1

    def create(self, submission: ContactSubmission) -> StoredContact:
        with self._lock:
            stored = StoredContact(
                id=self._next_id,
                name=submission.name,
                email=submission.email,
                subject=submission.subject,
                message=submission.message,
                submitted_at=timezone.now(),
            )
            self._messages.append(stored)
            self._next_id += 1
        logger.info("Stored contact message #%d in memory", stored.id)
        return stored

    def list(self) -> list[StoredContact]:
        with self._lock:
            return list(self._messages)

    def count(self) -> int:
        with self._lock:
            return len(self._messages)


class DatabaseContactStore(ContactStore):
    """Persists messages through the ``ContactMessage`` model."""

    def create(self, submission: ContactSubmission) -> StoredContact:
        try:
            obj = ContactMessage.objects.create(
                name=submission.name,
                email=submission.email,
                subject=submission.subject,
                message=submission.message,
            )
        except DatabaseError as exc:
            raise ContactStoreError("Could not save contact message") from exc
        logger.info("Stored contact message #%d in database", obj.pk)
        return _to_stored(obj)

    def list(self) -> list[StoredContact]:
        try:
            return [_to_stored(obj) for obj in ContactMessage.objects.order_by("id")]
        except DatabaseError as exc:
            raise ContactStoreError("Could not load contact messages") from exc

    def count(self) -> int:
        try:
            return ContactMessage.objects.count()
        except DatabaseError as exc:
            raise ContactStoreError("Could not count contact messages") from exc


def _to_stored(obj: ContactMessage) -> StoredContact:
    return StoredContact(
        id=obj.pk,
        name=obj.name,
        email=obj.email,
        subject=obj.subject,
        message=obj.message,
        submitted_at=obj.submitted_at,
    )


def build_contact_store(path: str | None = None) -> ContactStore:
    """Instantiate the store class named by ``path`` or ``settings.CONTACT_STORE``."""
    store_class = import_string(path or settings.CONTACT_STORE)
    store = store_class()
    if not isinstance(store, ContactStore):
        raise TypeError(f"{store_class!r} is not a ContactStore")
    return store
