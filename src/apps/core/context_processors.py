"""Context processors for the core app."""

from django.conf import settings
from django.http import HttpRequest


def site_context(request: HttpRequest) -> dict:
    """Add site-wide context variables to all templates."""
    return {
        "GOOGLE_ANALYTICS_ID": getattr(settings, "GOOGLE_ANALYTICS_ID", ""),
        "OWNER_NAME": settings.PORTFOLIO_OWNER_NAME,
        "OWNER_TITLE": settings.PORTFOLIO_OWNER_TITLE,
        "OWNER_EMAIL": settings.PORTFOLIO_OWNER_EMAIL,
    }
