"""
Django production settings for the Flex Agency website.
"""

from django.core.exceptions import ImproperlyConfigured

from .base import *  # noqa: F403
from .base import env

DEBUG = False

ALLOWED_HOSTS = env("ALLOWED_HOSTS")

SECRET_KEY = env("SECRET_KEY")

# Security settings
SECURE_BROWSER_XSS_FILTER = True
SECURE_CONTENT_TYPE_NOSNIFF = True
SECURE_SSL_REDIRECT = env.bool("SECURE_SSL_REDIRECT", default=True)
SESSION_COOKIE_SECURE = env.bool("SECURE_SSL_REDIRECT", default=True)
CSRF_COOKIE_SECURE = env.bool("SECURE_SSL_REDIRECT", default=True)
SECURE_HSTS_SECONDS = 31536000 if env.bool("SECURE_SSL_REDIRECT", default=True) else 0
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

# Email via Mailgun in production
EMAIL_BACKEND = "anymail.backends.mailgun.EmailBackend"

# Content is read from the edge cache; set SANITY_USE_CDN=False to read fresh drafts
SANITY_USE_CDN = env.bool("SANITY_USE_CDN", default=True)

# Sessions live entirely in the signed cookie
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = "Lax"
SESSION_COOKIE_AGE = env.int("SESSION_COOKIE_AGE", default=60 * 60 * 24 * 14)

# Contact notifications go through Mailgun templates when anymail is selected
CONTACT_MAILER = env("CONTACT_MAILER", default="emailjs")
if CONTACT_MAILER == "anymail" and not CONTACT_NOTIFICATION_EMAILS:  # noqa: F405
    raise ImproperlyConfigured("CONTACT_NOTIFICATION_EMAILS must be set when CONTACT_MAILER is 'anymail'")
