"""JSON API views for the contact form and resume download."""

import json
import logging

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from .resume import ResumeUnavailableError, load_resume, resume_filename
from .services import send_contact_notification
from .stores import ContactStore, ContactStoreError
from .validation import validate_submission

logger = logging.getLogger(__name__)

SUBMIT_FAILED_MESSAGE = "Failed to submit contact form. Please check your input and try again."
FETCH_FAILED_MESSAGE = "Failed to fetch contacts"
RESUME_FAILED_MESSAGE = "Failed to download resume"


def _failure(message: str, status: int) -> JsonResponse:
    return JsonResponse({"success": False, "message": message}, status=status)


class ContactStoreMixin:
    """Holds the contact store passed in through ``as_view(store=...)``."""

    store: ContactStore | None = None

    def get_store(self) -> ContactStore:
        if self.store is None:
            raise ContactStoreError(f"{type(self).__name__} was configured without a contact store")
        return self.store


@method_decorator(csrf_exempt, name="dispatch")
class ContactSubmitAPIView(ContactStoreMixin, View):
    """API: Accept a contact form submission."""

    http_method_names = ["post"]

    def post(self, request: HttpRequest) -> JsonResponse:
        """Validate the JSON body and store it as a new contact message."""
        try:
            data = json.loads(request.body)
        except (ValueError, RecursionError):
            logger.info("Rejected contact submission: body is not valid JSON")
            return _failure(SUBMIT_FAILED_MESSAGE, 400)

        result = validate_submission(data)
        if not result.is_valid:
            logger.info("Rejected contact submission: %s", "; ".join(result.errors))
            return _failure(SUBMIT_FAILED_MESSAGE, 400)

        try:
            contact = self.get_store().create(result.submission)
        except Exception:
            logger.exception("Contact form error")
            return _failure(SUBMIT_FAILED_MESSAGE, 500)

        send_contact_notification(contact)
        return JsonResponse({"success": True, "id": contact.id})


class ContactListAPIView(ContactStoreMixin, View):
    """API: List every stored contact message."""

    http_method_names = ["get"]

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            contacts = self.get_store().list()
        except Exception:
            logger.exception("Error fetching contacts")
            return _failure(FETCH_FAILED_MESSAGE, 500)
        return JsonResponse([contact.as_dict() for contact in contacts], safe=False)


class ResumeDownloadAPIView(View):
    """API: Serve the resume as a plain-text attachment."""

    http_method_names = ["get"]

    def get(self, request: HttpRequest) -> HttpResponse:
        try:
            content = load_resume()
        except ResumeUnavailableError:
            logger.exception("Error downloading resume")
            return _failure(RESUME_FAILED_MESSAGE, 500)

        response = HttpResponse(content, content_type="text/plain; charset=utf-8")
        response["Content-Disposition"] = f'attachment; filename="{resume_filename()}"'
        return response
