"""API URL configuration for the contact form and resume endpoints."""

from django.urls import path

from . import api_views
from .stores import build_contact_store

app_name = "api"

contact_store = build_contact_store()

urlpatterns = [
    path("contact", api_views.ContactSubmitAPIView.as_view(store=contact_store), name="contact_submit"),
    path("contacts", api_views.ContactListAPIView.as_view(store=contact_store), name="contact_list"),
    path("resume/download", api_views.ResumeDownloadAPIView.as_view(), name="resume_download"),
]
