"""Resume document served by the download endpoint."""

import re
from pathlib import Path

from django.conf import settings


class ResumeUnavailableError(Exception):
    """Raised when the resume text cannot be served."""


def load_resume() -> str:
    """Read the resume text from ``settings.RESUME_PATH``."""
    path = Path(settings.RESUME_PATH)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ResumeUnavailableError(f"Cannot read resume at {path}") from exc
    if not content.strip():
        raise ResumeUnavailableError(f"Resume at {path} is empty")
    return content


def resume_filename() -> str:
    """Attachment filename derived from the owner name, e.g. ``Jit_Goria_Resume.txt``."""
    owner = re.sub(r"\s+", "_", settings.PORTFOLIO_OWNER_NAME.strip())
    return f"{owner}_Resume.txt" if owner else "Resume.txt"
