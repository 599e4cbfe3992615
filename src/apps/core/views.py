"""Core app views."""

from django.http import HttpRequest, HttpResponse
from django.views import View
from django.views.generic import TemplateView


class RobotsTxtView(View):
    """Serve robots.txt keeping crawlers out of the admin and API."""

    ROBOTS_TXT = (
        "User-agent: *\n"
        "Allow: /\n"
        "\n"
        "Disallow: /admin/\n"
        "Disallow: /api/\n"
    )

    def get(self, request: HttpRequest) -> HttpResponse:
        return HttpResponse(self.ROBOTS_TXT, content_type="text/plain")


class IndexView(TemplateView):
    """Public portfolio page."""

    template_name = "index.html"
