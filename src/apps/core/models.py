"""Core app models."""

from typing import ClassVar

from django.db import models

NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 254
SUBJECT_MAX_LENGTH = 255


class ContactMessage(models.Model):
    """Stores contact form submissions. Rows are written once and never edited."""

    name = models.CharField(max_length=NAME_MAX_LENGTH)
    email = models.EmailField(max_length=EMAIL_MAX_LENGTH)
    subject = models.CharField(max_length=SUBJECT_MAX_LENGTH)
    message = models.TextField()
    submitted_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering: ClassVar[list[str]] = ["id"]
        verbose_name = "contact message"
        verbose_name_plural = "contact messages"

    def __str__(self) -> str:
        return f"{self.name} - {self.subject} ({self.submitted_at:%Y-%m-%d})"
