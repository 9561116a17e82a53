"""Contact form validation and submission state."""

import logging
import re
from enum import StrEnum

from django.conf import settings

from apps.content.records import ContactSubmission

from .services import Mailer, MailSendError
from .timers import Scheduler, TimerGroup

logger = logging.getLogger(__name__)

FIELDS = ("name", "email", "phone", "service", "message")

SERVICE_CHOICES = [
    "Social Media Marketing",
    "SEO Optimization",
    "Content Marketing",
    "PPC Advertising",
    "Branding & Design",
    "Web Design & Development",
    "Other",
]

MESSAGE_MIN_LENGTH = 10

# Seconds after a successful send.
BANNER_FADE_AFTER = 4.0
BANNER_HIDE_AFTER = 4.5

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
PHONE_PATTERN = re.compile(r"^\+?[\d\s\-()]+$")


def validate_submission(values: dict[str, str]) -> dict[str, str]:
    """Validate every field at once and return a field -> message map of failures."""
    errors: dict[str, str] = {}

    if not values.get("name", "").strip():
        errors["name"] = "Name is required"

    email = values.get("email", "").strip()
    if not email:
        errors["email"] = "Email is required"
    elif not EMAIL_PATTERN.search(email):
        errors["email"] = "Email is invalid"

    phone = values.get("phone", "").strip()
    if not phone:
        errors["phone"] = "Phone number is required"
    elif not PHONE_PATTERN.match(phone):
        errors["phone"] = "Phone number is invalid"

    if values.get("service", "") not in SERVICE_CHOICES:
        errors["service"] = "Please select a service"

    message = values.get("message", "").strip()
    if not message:
        errors["message"] = "Message is required"
    elif len(message) < MESSAGE_MIN_LENGTH:
        errors["message"] = f"Message must be at least {MESSAGE_MIN_LENGTH} characters"

    return errors


def fallback_email() -> str:
    return getattr(settings, "CONTACT_FALLBACK_EMAIL", "flaxdigi@gmail.com")


class SubmissionStatus(StrEnum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"


class BannerState(StrEnum):
    HIDDEN = "hidden"
    VISIBLE = "visible"
    FADING = "fading"


class ContactFormController:
    """State of the contact form across edits and one submission at a time."""

    def __init__(self, *, mailer: Mailer, scheduler: Scheduler | None = None, fallback: str = "") -> None:
        self.mailer = mailer
        self.fallback = fallback or fallback_email()
        self.values: dict[str, str] = dict.fromkeys(FIELDS, "")
        self.errors: dict[str, str] = {}
        self.status = SubmissionStatus.IDLE
        self.is_message_visible = False
        self.alert: str | None = None
        self._timers = TimerGroup(scheduler)

    @property
    def submit_disabled(self) -> bool:
        return self.status == SubmissionStatus.SUBMITTING

    @property
    def banner(self) -> BannerState:
        if self.status != SubmissionStatus.SUCCEEDED:
            return BannerState.HIDDEN
        return BannerState.VISIBLE if self.is_message_visible else BannerState.FADING

    def update(self, field: str, value: str) -> None:
        """Set a field value and drop any error it was showing."""
        if field not in self.values:
            msg = f"Unknown contact form field {field!r}"
            raise KeyError(msg)
        self.values[field] = value
        self.errors.pop(field, None)

    def bind(self, data) -> None:
        """Update every known field from a mapping such as ``request.POST``."""
        for field in FIELDS:
            self.update(field, data.get(field, ""))

    async def submit(self) -> bool:
        """Validate and, if clean, send the submission once.

        Returns True when the message was handed to the mail service.
        """
        if self.submit_disabled:
            return False

        self.alert = None
        self.errors = validate_submission(self.values)
        if self.errors:
            return False

        self.status = SubmissionStatus.SUBMITTING
        submission = ContactSubmission(**{field: self.values[field].strip() for field in FIELDS})
        try:
            await self.mailer.send(submission.as_payload())
        except MailSendError:
            logger.exception("Failed to send contact message from %s", submission.email)
            self.status = SubmissionStatus.IDLE
            self.alert = (
                f"Failed to send message. Please try again or contact us directly at {self.fallback}"
            )
            return False

        self.values = dict.fromkeys(FIELDS, "")
        self.status = SubmissionStatus.SUCCEEDED
        self.is_message_visible = True
        self._timers.cancel_all()
        self._timers.schedule(BANNER_FADE_AFTER, self._fade_banner)
        self._timers.schedule(BANNER_HIDE_AFTER, self._hide_banner)
        return True

    def _fade_banner(self) -> None:
        self.is_message_visible = False

    def _hide_banner(self) -> None:
        self.is_message_visible = False
        if self.status == SubmissionStatus.SUCCEEDED:
            self.status = SubmissionStatus.IDLE

    def teardown(self) -> None:
        self._timers.cancel_all()
