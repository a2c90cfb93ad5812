"""
Transactional email over SMTP.

Sending is best effort: a failed connection, login or delivery is
logged and reported as ``False``, never raised, retried or queued.
Callers can therefore fire a send without guarding it.  The SMTP
exchange itself is blocking and runs in a worker thread so the event
loop keeps serving other requests meanwhile.
"""

import asyncio
import html
import logging
import smtplib
from email.message import EmailMessage
from typing import Callable, Optional

from ..core.config import settings


logger = logging.getLogger(__name__)


def html_paragraph(message: str) -> str:
    """Wrap plain text in a paragraph, escaping markup."""
    return f"<p>{html.escape(message)}</p>"


class NotificationService:
    """Sends HTML email from the configured account.

    A new SMTP‑over‑SSL connection is opened for every message, since
    idle SMTP sessions are dropped by the server long before the next
    booking arrives.
    """

    def __init__(
        self,
        sender: Optional[str] = None,
        password: Optional[str] = None,
        host: Optional[str] = None,
        port: Optional[int] = None,
        verify_transport: Optional[bool] = None,
        smtp_factory: Callable[..., smtplib.SMTP] = smtplib.SMTP_SSL,
    ) -> None:
        self.sender = settings.email_user if sender is None else sender
        self.password = settings.email_password if password is None else password
        self.host = host or settings.smtp_host
        self.port = port or settings.smtp_port
        self.verify_transport = settings.email_verify_transport if verify_transport is None else verify_transport
        self.smtp_factory = smtp_factory

    def build_message(self, subject: str, html_body: str, recipient: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = recipient
        message["Subject"] = subject
        message.set_content(html_body, subtype="html")
        return message

    def _deliver(self, message: EmailMessage) -> None:
        with self.smtp_factory(self.host, self.port, timeout=30) as smtp:
            if self.verify_transport:
                code, reply = smtp.noop()
                if code == 250:
                    logger.debug("Server is ready to take our messages")
                else:
                    logger.warning("SMTP server answered NOOP with %s %r", code, reply)
            if self.password:
                smtp.login(self.sender, self.password)
            smtp.send_message(message)

    async def send(self, subject: str, html_body: str, recipient: Optional[str]) -> bool:
        """Send one message.  Returns ``True`` if the server accepted it."""
        if not recipient:
            logger.warning("Skipping email %r: no recipient", subject)
            return False
        message = self.build_message(subject, html_body, recipient)
        try:
            await asyncio.to_thread(self._deliver, message)
        except Exception as e:
            logger.error("Failed to send email %r to %s: %s", subject, recipient, e)
            return False
        logger.info("Email sent to %s: %s", recipient, subject)
        return True
