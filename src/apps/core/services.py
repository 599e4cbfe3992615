"""Core app services."""

import logging

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string

from .stores import StoredContact

logger = logging.getLogger(__name__)


def _header_value(value: str) -> str:
    """Collapse whitespace runs, newlines included, so the value is a legal header."""
    return " ".join(value.split())


def send_contact_notification(contact: StoredContact) -> None:
    """Send an email notification to the site owner when a contact form is submitted."""
    recipients: list[str] = list(getattr(settings, "CONTACT_NOTIFICATION_EMAILS", []))

    if not recipients:
        logger.warning("No CONTACT_NOTIFICATION_EMAILS configured, skipping notification.")
        return

    sender_name = _header_value(contact.name)
    subject = f"New message from {sender_name}: {_header_value(contact.subject)}"

    # Plain text version
    text_body = (
        f"New contact form submission received:\n\n"
        f"Name: {contact.name}\n"
        f"Email: {contact.email}\n"
        f"Subject: {contact.subject}\n"
        f"Message:\n{contact.message}\n\n"
        f"Submitted: {contact.submitted_at:%Y-%m-%d %H:%M} UTC\n"
    )

    # HTML version
    html_body = render_to_string(
        "emails/contact_notification.html",
        {"contact": contact, "owner_name": settings.PORTFOLIO_OWNER_NAME},
    )

    try:
        msg = EmailMultiAlternatives(
            subject=subject,
            body=text_body,
            from_email=settings.DEFAULT_FROM_EMAIL,
            to=recipients,
            reply_to=[f"{sender_name} <{contact.email}>"],
        )
        msg.attach_alternative(html_body, "text/html")
        msg.send(fail_silently=False)
        logger.info("Contact notification sent to %s for message #%d", recipients, contact.id)
    except Exception:
        logger.exception("Failed to send contact notification for message #%d", contact.id)
