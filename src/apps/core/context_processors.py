"""Context processors for the core app."""

from django.conf import settings
from django.http import HttpRequest

from .overlay import DEFAULT_EXEMPT_PREFIX, LoadingOverlay, SessionLoaderState


def site_context(request: HttpRequest) -> dict:
    """Add site-wide context variables to all templates."""
    return {
        "GOOGLE_ANALYTICS_ID": getattr(settings, "GOOGLE_ANALYTICS_ID", ""),
        "SITE_NAME": "Flex Agency",
        "SITE_TAGLINE": "Elevate Your Digital Presence",
    }


def loading_overlay(request: HttpRequest) -> dict:
    """Tell the page whether to play the loading overlay, and with which timing."""
    overlay = LoadingOverlay(
        SessionLoaderState(request.session),
        exempt_prefix=getattr(settings, "LOADING_OVERLAY_EXEMPT_PREFIX", DEFAULT_EXEMPT_PREFIX),
    )
    return {"loading_overlay": overlay.plan(request.path)}
