"""Tests for the contact notification email."""

import json
from unittest.mock import patch

from django.core import mail
from django.utils import timezone

from apps.core.api_views import ContactSubmitAPIView
from apps.core.services import send_contact_notification
from apps.core.stores import StoredContact


def _contact() -> StoredContact:
    return StoredContact(
        id=3,
        name="Alice",
        email="alice@example.com",
        subject="Hi",
        message="Hello there",
        submitted_at=timezone.now(),
    )


class TestSendContactNotification:
    """Test the email sent for each stored contact message."""

    def test_sends_email_to_configured_recipients(self, settings) -> None:
        settings.CONTACT_NOTIFICATION_EMAILS = ["owner@example.com"]
        send_contact_notification(_contact())

        assert len(mail.outbox) == 1
        msg = mail.outbox[0]
        assert msg.to == ["owner@example.com"]
        assert msg.subject == "New message from Alice: Hi"
        assert msg.reply_to == ["Alice <alice@example.com>"]
        assert "Hello there" in msg.body
        html, mimetype = msg.alternatives[0]
        assert mimetype == "text/html"
        assert "alice@example.com" in html

    def test_skips_without_recipients(self, settings) -> None:
        settings.CONTACT_NOTIFICATION_EMAILS = []
        send_contact_notification(_contact())
        assert mail.outbox == []

    def test_mail_failure_is_swallowed(self, settings, caplog) -> None:
        settings.CONTACT_NOTIFICATION_EMAILS = ["owner@example.com"]
        with patch("apps.core.services.EmailMultiAlternatives.send", side_effect=ConnectionError("smtp down")):
            send_contact_notification(_contact())
        assert "Failed to send contact notification for message #3" in caplog.text

    def test_submission_triggers_notification(self, settings, store, post_json) -> None:
        settings.CONTACT_NOTIFICATION_EMAILS = ["owner@example.com"]
        payload = {"name": "Alice", "email": "alice@example.com", "subject": "Hi", "message": "Hello there"}
        response = post_json(ContactSubmitAPIView.as_view(store=store), payload)
        assert json.loads(response.content) == {"success": True, "id": 1}
        assert len(mail.outbox) == 1

    def test_mail_failure_does_not_fail_submission(self, settings, store, post_json, alice) -> None:
        settings.CONTACT_NOTIFICATION_EMAILS = ["owner@example.com"]
        with patch("apps.core.services.EmailMultiAlternatives.send", side_effect=ConnectionError("smtp down")):
            response = post_json(ContactSubmitAPIView.as_view(store=store), alice)
        assert response.status_code == 200
        assert store.count() == 1

    def test_newlines_in_header_fields_are_collapsed(self, settings, store, post_json, alice) -> None:
        settings.CONTACT_NOTIFICATION_EMAILS = ["owner@example.com"]
        alice["name"] = "Jane\nDoe"
        alice["subject"] = "Hi\r\nthere"
        response = post_json(ContactSubmitAPIView.as_view(store=store), alice)

        assert response.status_code == 200
        assert len(mail.outbox) == 1
        msg = mail.outbox[0]
        assert msg.subject == "New message from Jane Doe: Hi there"
        assert msg.reply_to == ["Jane Doe <alice@example.com>"]
        assert store.list()[0].name == "Jane\nDoe"

    def test_rejected_submission_sends_nothing(self, settings, store, post_json) -> None:
        settings.CONTACT_NOTIFICATION_EMAILS = ["owner@example.com"]
        post_json(ContactSubmitAPIView.as_view(store=store), {"name": "Alice"})
        assert mail.outbox == []
