"""Core app URL configuration."""

from django.urls import path

from . import views

app_name = "core"

urlpatterns = [
    path("", views.IndexView.as_view(), name="index"),
    path("robots.txt", views.RobotsTxtView.as_view(), name="robots_txt"),
]
