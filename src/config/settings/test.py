"""
Django test settings for the Flex Agency website.
"""

from .base import *  # noqa: F403

DEBUG = False

SECRET_KEY = "django-insecure-test-key-only"  # noqa: S105

ALLOWED_HOSTS = ["*"]

# Use in-memory email backend
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"

# Deterministic store settings; network calls are patched in tests
SANITY_PROJECT_ID = "testproj"
SANITY_DATASET = "production"
SANITY_USE_CDN = False
SANITY_STUDIO_URL = "https://flexagency.sanity.studio/"

CONTACT_MAILER = "emailjs"
CONTACT_FALLBACK_EMAIL = "flaxdigi@gmail.com"
CONTACT_NOTIFICATION_EMAILS = ["team@flexagency.com"]
EMAILJS_SERVICE_ID = "service_test"
EMAILJS_TEMPLATE_ID = "template_test"
EMAILJS_PUBLIC_KEY = "public_test"

# Use simple static files storage in tests
STORAGES = {
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}
