"""
Django test settings for the portfolio web application.
"""

from .base import *  # noqa: F403
from .base import env

DEBUG = False

SECRET_KEY = "django-insecure-test-key-only"  # noqa: S105

ALLOWED_HOSTS = ["*"]

# Use fast password hasher for tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# Use in-memory email backend
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"

# Use DATABASE_URL if set, otherwise an in-memory SQLite database
DATABASES = {
    "default": env.db("DATABASE_URL", default="sqlite://:memory:"),
}

# Use simple static files storage in tests
STORAGES = {
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}

CONTACT_STORE = "apps.core.stores.InMemoryContactStore"
CONTACT_NOTIFICATION_EMAILS = []
PORTFOLIO_OWNER_NAME = "Jit Goria"

# Let pytest's caplog see application log records
LOGGING["loggers"]["apps"]["propagate"] = True  # noqa: F405
