"""Tests for the core app views."""

import pytest
from django.test import Client
from django.urls import reverse

from apps.core.admin import ContactMessageAdmin
from apps.core.models import ContactMessage


@pytest.mark.django_db
class TestPublicViews:
    """Test public-facing views."""

    def test_index_page_loads(self, client: Client) -> None:
        """Test that the homepage loads successfully."""
        response = client.get(reverse("core:index"))
        assert response.status_code == 200
        assert b"Jit Goria" in response.content

    def test_index_links_api(self, client: Client) -> None:
        """Test that the homepage points at the contact and resume endpoints."""
        content = client.get(reverse("core:index")).content.decode()
        assert reverse("api:contact_submit") in content
        assert reverse("api:resume_download") in content

    def test_robots_txt(self, client: Client) -> None:
        """Test that robots.txt keeps crawlers out of the API."""
        response = client.get(reverse("core:robots_txt"))
        assert response.status_code == 200
        assert response["Content-Type"] == "text/plain"
        assert b"Disallow: /api/" in response.content

    def test_admin_requires_login(self, client: Client) -> None:
        """Test that the admin redirects to its login page."""
        response = client.get("/admin/")
        assert response.status_code == 302
        assert "/admin/login/" in response.url


class TestApiUrls:
    """The API paths match the public contract."""

    def test_paths(self) -> None:
        assert reverse("api:contact_submit") == "/api/contact"
        assert reverse("api:contact_list") == "/api/contacts"
        assert reverse("api:resume_download") == "/api/resume/download"


class TestContactMessageAdmin:
    """Stored messages are read-only in the admin."""

    def test_admin_is_read_only(self, rf) -> None:
        from django.contrib import admin

        model_admin = ContactMessageAdmin(ContactMessage, admin.site)
        request = rf.get("/admin/core/contactmessage/")
        assert model_admin.has_add_permission(request) is False
        assert model_admin.has_change_permission(request) is False
        assert model_admin.has_delete_permission(request) is False
