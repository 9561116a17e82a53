"""Core app views."""

import asyncio
import logging

from django.conf import settings
from django.contrib import messages
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import redirect
from django.template.response import TemplateResponse
from django.views import View
from django.views.generic import RedirectView, TemplateView

from apps.content import queries
from apps.content.exceptions import ContentStoreError
from apps.content.gallery import BodyScrollLock, GalleryViewer, gallery_images
from apps.content.listing import CategoryFilter

from . import services
from .contact import (
    BANNER_FADE_AFTER,
    BANNER_HIDE_AFTER,
    SERVICE_CHOICES,
    ContactFormController,
    fallback_email,
)
from .overlay import SessionLoaderState

logger = logging.getLogger(__name__)

CONTACT_SUCCESS_MESSAGE = "Thank you for your message! We'll get back to you soon."


async def _load_list(query) -> tuple[list, bool]:
    """Run a list query, returning ``(records, failed)``; failures degrade to an empty list."""
    try:
        return await query(), False
    except ContentStoreError:
        logger.exception("Failed to load %s", getattr(query, "__name__", query))
        return [], True


async def _load_one(query, slug: str):
    """Run a single-record query; a store failure is treated like a missing record."""
    try:
        return await query(slug)
    except ContentStoreError:
        logger.exception("Failed to load %s(%r)", getattr(query, "__name__", query), slug)
        return None


class RobotsTxtView(View):
    """Serve robots.txt."""

    ROBOTS_TXT = (
        "User-agent: *\n"
        "Allow: /\n"
        "Allow: /about/\n"
        "Allow: /services/\n"
        "Allow: /projects/\n"
        "Allow: /contact/\n"
        "\n"
        "Disallow: /studio/\n"
        "Disallow: /loader-seen/\n"
    )

    def get(self, request: HttpRequest) -> HttpResponse:
        return HttpResponse(self.ROBOTS_TXT, content_type="text/plain")


class IndexView(TemplateView):
    """Public homepage with featured projects and services."""

    template_name = "index.html"

    async def get(self, request: HttpRequest, *args, **kwargs) -> HttpResponse:
        (featured, _), (service_list, _) = await asyncio.gather(
            _load_list(queries.get_featured_projects),
            _load_list(queries.get_services),
        )
        context = self.get_context_data(featured_projects=featured, services=service_list, **kwargs)
        return self.render_to_response(context)


class AboutView(TemplateView):
    """About us page."""

    template_name = "about.html"


class ServicesView(TemplateView):
    """Services listing."""

    template_name = "services.html"

    async def get(self, request: HttpRequest, *args, **kwargs) -> HttpResponse:
        service_list, failed = await _load_list(queries.get_services)
        context = self.get_context_data(services=service_list, content_unavailable=failed, **kwargs)
        return self.render_to_response(context)


class ServiceDetailView(TemplateView):
    """A single service."""

    template_name = "service_detail.html"

    async def get(self, request: HttpRequest, slug: str, *args, **kwargs) -> HttpResponse:
        service = await _load_one(queries.get_service_by_slug, slug)
        if service is None:
            raise Http404("Service not found")
        return self.render_to_response(self.get_context_data(service=service, **kwargs))


class ProjectsView(TemplateView):
    """Projects showcase with a category filter."""

    template_name = "projects.html"

    async def get(self, request: HttpRequest, *args, **kwargs) -> HttpResponse:
        project_list, failed = await _load_list(queries.get_projects)
        listing = CategoryFilter(project_list)
        listing.select(request.GET.get("category", ""))
        context = self.get_context_data(
            listing=listing,
            projects=listing.displayed,
            categories=listing.category_choices(),
            content_unavailable=failed,
            **kwargs,
        )
        return self.render_to_response(context)


class ProjectDetailView(TemplateView):
    """A single project with its image gallery.

    ``?image=<n>`` opens the gallery lightbox on the n-th image.
    """

    template_name = "project_detail.html"

    async def get(self, request: HttpRequest, slug: str, *args, **kwargs) -> HttpResponse:
        project = await _load_one(queries.get_project_by_slug, slug)
        if project is None:
            raise Http404("Project not found")

        scroll_lock = BodyScrollLock()
        viewer = GalleryViewer(gallery_images(project.gallery), scroll_lock=scroll_lock)
        requested = request.GET.get("image")
        if requested is not None:
            try:
                viewer.open(int(requested))
            except (ValueError, IndexError):
                logger.info("Ignoring invalid gallery index %r for %s", requested, slug)

        context = self.get_context_data(
            project=project,
            gallery=viewer,
            body_scroll_locked=scroll_lock.locked,
            **kwargs,
        )
        return self.render_to_response(context)


def _contact_context(controller: ContactFormController | None = None) -> dict:
    return {
        "values": controller.values if controller else {},
        "errors": controller.errors if controller else {},
        "service_choices": SERVICE_CHOICES,
        "banner_fade_after_ms": int(BANNER_FADE_AFTER * 1000),
        "banner_hide_after_ms": int(BANNER_HIDE_AFTER * 1000),
        "fallback_email": fallback_email(),
    }


class ContactView(TemplateView):
    """Contact us page."""

    template_name = "contact.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update(_contact_context())
        return context


class ContactSubmitView(View):
    """Handle contact form submissions."""

    async def post(self, request: HttpRequest) -> HttpResponse:
        """Validate the form and hand it to the mail service once."""
        controller = ContactFormController(mailer=services.get_mailer())
        controller.bind(request.POST)
        try:
            sent = await controller.submit()
        finally:
            # Banner timing runs in the browser from here on.
            controller.teardown()

        if sent:
            messages.success(request, CONTACT_SUCCESS_MESSAGE)
            return redirect("core:contact")

        if controller.alert:
            messages.error(request, controller.alert)
        return TemplateResponse(request, "contact.html", _contact_context(controller))


class StudioRedirectView(RedirectView):
    """Send editors to the hosted content studio."""

    permanent = False

    def get_redirect_url(self, *args, **kwargs) -> str:
        return getattr(settings, "SANITY_STUDIO_URL", "") or "/"


class LoaderSeenView(View):
    """Record that the initial loading animation finished for this session."""

    def post(self, request: HttpRequest) -> HttpResponse:
        SessionLoaderState(request.session).mark_seen()
        return HttpResponse(status=204)
