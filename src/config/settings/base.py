"""
Django base settings for the Flex Agency website.
"""

from pathlib import Path

import environ

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent

env = environ.Env(
    DEBUG=(bool, False),
    ALLOWED_HOSTS=(list, []),
    GOOGLE_ANALYTICS_ID=(str, ""),
    SANITY_USE_CDN=(bool, True),
    CONTACT_NOTIFICATION_EMAILS=(list, []),
)

# Read .env file from project root (parent of src/)
env_file = BASE_DIR.parent / ".env"
if env_file.exists():
    environ.Env.read_env(str(env_file))

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = env("SECRET_KEY", default="django-insecure-change-me-in-production")

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = env("DEBUG")

ALLOWED_HOSTS = env("ALLOWED_HOSTS")

# Application definition
INSTALLED_APPS = [
    "django.contrib.messages",
    "django.contrib.staticfiles",
    # Third party
    "anymail",
    # Local apps
    "apps.content",
    "apps.core",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.messages.context_processors.messages",
                "apps.core.context_processors.site_context",
                "apps.core.context_processors.loading_overlay",
            ],
        },
    },
]

ASGI_APPLICATION = "config.asgi.application"
WSGI_APPLICATION = "config.wsgi.application"

# All content lives in the CMS; the site keeps no database.
DATABASES = {}

# Sessions only hold the loading-overlay flag and flash messages.
SESSION_ENGINE = "django.contrib.sessions.backends.signed_cookies"
SESSION_EXPIRE_AT_BROWSER_CLOSE = True
MESSAGE_STORAGE = "django.contrib.messages.storage.session.SessionStorage"

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "Asia/Colombo"
USE_I18N = True
USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = "static/"
STATICFILES_DIRS = [BASE_DIR / "static"]
STATIC_ROOT = BASE_DIR.parent / "staticfiles"

# WhiteNoise configuration
STORAGES = {
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage",
    },
}

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Sanity content store
SANITY_PROJECT_ID = env("SANITY_PROJECT_ID", default="")
SANITY_DATASET = env("SANITY_DATASET", default="production")
SANITY_API_VERSION = env("SANITY_API_VERSION", default="2024-01-01")
SANITY_USE_CDN = env("SANITY_USE_CDN")
SANITY_API_TOKEN = env("SANITY_API_TOKEN", default="")
SANITY_STUDIO_URL = env("SANITY_STUDIO_URL", default="")

# Loading overlay is never shown under this path
LOADING_OVERLAY_EXEMPT_PREFIX = "/studio/"

# Email configuration
EMAIL_BACKEND = "django.core.mail.backends.console.EmailBackend"
DEFAULT_FROM_EMAIL_ADDRESS = env("DEFAULT_FROM_EMAIL_ADDRESS", default="hello@flexagency.com")
DEFAULT_FROM_EMAIL = f"Flex Agency <{DEFAULT_FROM_EMAIL_ADDRESS}>"

# Contact form delivery: "emailjs" or "anymail"
CONTACT_MAILER = env("CONTACT_MAILER", default="emailjs")
CONTACT_FALLBACK_EMAIL = env("CONTACT_FALLBACK_EMAIL", default="flaxdigi@gmail.com")
CONTACT_NOTIFICATION_EMAILS = env("CONTACT_NOTIFICATION_EMAILS")
CONTACT_TEMPLATE_ID = env("CONTACT_TEMPLATE_ID", default="")

# EmailJS
EMAILJS_SERVICE_ID = env("EMAILJS_SERVICE_ID", default="")
EMAILJS_TEMPLATE_ID = env("EMAILJS_TEMPLATE_ID", default="")
EMAILJS_PUBLIC_KEY = env("EMAILJS_PUBLIC_KEY", default="")
EMAILJS_PRIVATE_KEY = env("EMAILJS_PRIVATE_KEY", default="")

# Anymail (Mailgun)
ANYMAIL = {
    "MAILGUN_API_KEY": env("MAILGUN_API_KEY", default=""),
    "MAILGUN_SENDER_DOMAIN": env("MAILGUN_DOMAIN", default="flexagency.com"),
}

# Google Analytics
GOOGLE_ANALYTICS_ID = env("GOOGLE_ANALYTICS_ID", default="")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "{levelname} {asctime} {name}: {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "apps": {"handlers": ["console"], "level": "INFO"},
    },
}
