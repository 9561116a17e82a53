"""Template tags for rendering content store images."""

import logging

from django import template

from apps.content.images import url_for

logger = logging.getLogger(__name__)

register = template.Library()


@register.simple_tag
def image_url(source, width=None, height=None, fit=None) -> str:
    """Render a CDN URL for an image reference, or "" when there is no usable image."""
    if not source:
        return ""
    try:
        image = url_for(source)
        if width:
            image = image.width(width)
        if height:
            image = image.height(height)
        if fit:
            image = image.fit_mode(fit)
    except ValueError:
        logger.warning("Skipping unusable image reference: %r", source)
        return ""
    return image.url()
