"""Validation of inbound contact form payloads."""

from dataclasses import dataclass
from typing import Any

from django.core.exceptions import ValidationError
from django.core.validators import validate_email

from .models import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH, SUBJECT_MAX_LENGTH

REQUIRED_FIELDS = ("name", "email", "subject", "message")

MAX_LENGTHS: dict[str, int] = {
    "name": NAME_MAX_LENGTH,
    "email": EMAIL_MAX_LENGTH,
    "subject": SUBJECT_MAX_LENGTH,
}


@dataclass(frozen=True)
class ContactSubmission:
    """A contact form payload that passed validation, with values trimmed."""

    name: str
    email: str
    subject: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Either a clean submission or the constraints the payload violated."""

    submission: ContactSubmission | None = None
    errors: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return self.submission is not None


def validate_submission(data: Any) -> ValidationResult:
    """
    Check a decoded JSON body against the contact form schema.

    Every field must be present, a string, non-empty once surrounding
    whitespace is stripped, and within the column length. ``email`` must
    also be a syntactically valid address.
    """
    if not isinstance(data, dict):
        return ValidationResult(errors=("body: expected a JSON object",))

    errors: list[str] = []
    cleaned: dict[str, str] = {}

    for field in REQUIRED_FIELDS:
        if field not in data or data[field] is None:
            errors.append(f"{field}: required")
            continue
        value = data[field]
        if not isinstance(value, str):
            errors.append(f"{field}: must be a string")
            continue
        value = value.strip()
        if not value:
            errors.append(f"{field}: must not be empty")
            continue
        max_length = MAX_LENGTHS.get(field)
        if max_length is not None and len(value) > max_length:
            errors.append(f"{field}: must be at most {max_length} characters")
            continue
        cleaned[field] = value

    if "email" in cleaned:
        try:
            validate_email(cleaned["email"])
        except ValidationError:
            errors.append("email: invalid email address")

    if errors:
        return ValidationResult(errors=tuple(errors))
    return ValidationResult(submission=ContactSubmission(**cleaned))
