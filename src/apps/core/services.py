"""Outbound mail services for contact form submissions."""

import asyncio
import json
import logging
from http.client import HTTPException
from typing import Protocol
from urllib.error import HTTPError
from urllib.request import Request, urlopen

from anymail.exceptions import AnymailError
from anymail.message import AnymailMessage
from django.conf import settings

logger = logging.getLogger(__name__)

EMAILJS_API_URL = "https://api.emailjs.com/api/v1.0/email/send"


class MailSendError(Exception):
    """Raised when the mail service does not accept a message."""


class Mailer(Protocol):
    async def send(self, payload: dict[str, str]) -> None: ...


class EmailJSMailer:
    """Send template emails through the EmailJS REST API."""

    def __init__(
        self,
        *,
        service_id: str,
        template_id: str,
        public_key: str,
        private_key: str = "",
        timeout: int = 15,
    ) -> None:
        self.service_id = service_id
        self.template_id = template_id
        self.public_key = public_key
        self.private_key = private_key
        self.timeout = timeout

    def build_body(self, payload: dict[str, str]) -> dict:
        body = {
            "service_id": self.service_id,
            "template_id": self.template_id,
            "user_id": self.public_key,
            "template_params": payload,
        }
        if self.private_key:
            body["accessToken"] = self.private_key
        return body

    def _post(self, data: bytes) -> None:
        """Synchronous send request (for use in executors)."""
        req = Request(  # noqa: S310
            EMAILJS_API_URL,
            data=data,
            headers={"Content-Type": "application/json"},
            method="POST",
        )
        try:
            with urlopen(req, timeout=self.timeout) as response:  # noqa: S310
                response.read()
        except HTTPError as exc:
            body = exc.read().decode(errors="replace")[:200]
            msg = f"EmailJS returned HTTP {exc.code}: {body}"
            logger.error(msg)
            raise MailSendError(msg) from exc
        except (OSError, HTTPException) as exc:
            msg = f"EmailJS request failed: {exc}"
            logger.error(msg)
            raise MailSendError(msg) from exc

    async def send(self, payload: dict[str, str]) -> None:
        if not (self.service_id and self.template_id and self.public_key):
            msg = "EmailJS is not configured"
            logger.warning(msg)
            raise MailSendError(msg)

        data = json.dumps(self.build_body(payload)).encode()
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._post, data)
        logger.info("Contact message from %s sent via EmailJS", payload.get("email"))


class TemplateEmailMailer:
    """Send contact messages through the configured Django email backend.

    With an anymail backend the message is rendered by the ESP's stored
    template; other backends receive the plain-text body.
    """

    def __init__(self, *, template_id: str, recipients: list[str]) -> None:
        self.template_id = template_id
        self.recipients = recipients

    def build_message(self, payload: dict[str, str]) -> AnymailMessage:
        name = payload.get("name", "")
        text_body = (
            f"New contact form submission received:\n\n"
            f"Name: {name}\n"
            f"Email: {payload.get('email', '')}\n"
            f"Phone: {payload.get('phone') or 'Not provided'}\n"
            f"Service: {payload.get('service') or 'Not specified'}\n"
            f"Message:\n{payload.get('message', '')}\n"
        )
        msg = AnymailMessage(
            subject=f"New Contact Submission from {name}",
            body=text_body,
            from_email=f"{name} via Flex Agency <{settings.DEFAULT_FROM_EMAIL_ADDRESS}>",
            to=self.recipients,
            reply_to=[f"{name} <{payload.get('email', '')}>"],
        )
        if self.template_id:
            msg.template_id = self.template_id
            msg.merge_global_data = payload
        return msg

    async def send(self, payload: dict[str, str]) -> None:
        if not self.recipients:
            msg = "No CONTACT_NOTIFICATION_EMAILS configured"
            logger.warning(msg)
            raise MailSendError(msg)

        msg = self.build_message(payload)
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, lambda: msg.send(fail_silently=False))
        except (AnymailError, OSError) as exc:
            raise MailSendError(str(exc)) from exc
        logger.info("Contact notification sent to %s for %s", self.recipients, payload.get("email"))


def get_mailer() -> Mailer:
    """Return the mailer selected by the CONTACT_MAILER setting."""
    backend = getattr(settings, "CONTACT_MAILER", "emailjs")
    if backend == "anymail":
        return TemplateEmailMailer(
            template_id=getattr(settings, "CONTACT_TEMPLATE_ID", ""),
            recipients=list(getattr(settings, "CONTACT_NOTIFICATION_EMAILS", [])),
        )
    return EmailJSMailer(
        service_id=getattr(settings, "EMAILJS_SERVICE_ID", ""),
        template_id=getattr(settings, "EMAILJS_TEMPLATE_ID", ""),
        public_key=getattr(settings, "EMAILJS_PUBLIC_KEY", ""),
        private_key=getattr(settings, "EMAILJS_PRIVATE_KEY", ""),
    )
