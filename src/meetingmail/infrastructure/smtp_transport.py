"""SMTP mail transport."""

import asyncio
import logging
import smtplib
import ssl
from abc import ABC, abstractmethod
from email.message import EmailMessage

from meetingmail.config import Settings
from meetingmail.errors import ConfigurationError, DeliveryError

logger = logging.getLogger(__name__)


class MailTransport(ABC):
    """Delivers a single HTML email."""

    @abstractmethod
    async def send(self, recipient: str, subject: str, html: str) -> None:
        """Send the message.

        Raises:
            ConfigurationError: transport settings are incomplete
            DeliveryError: the relay rejected the message or was unreachable
        """


class SMTPMailTransport(MailTransport):
    """Sends mail through an SMTP relay configured from settings.

    Port 465 uses implicit TLS; any other port starts in plaintext and
    upgrades with STARTTLS when the server offers it.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def _build_message(self, recipient: str, subject: str, html: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.settings.mail_sender
        message["To"] = recipient
        # Header values cannot carry line breaks
        message["Subject"] = " ".join(subject.split("\n")).replace("\r", "")
        message.set_content(html, subtype="html")
        return message

    def _connect(self) -> smtplib.SMTP:
        host = self.settings.mail_host
        port = self.settings.mail_port
        timeout = self.settings.mail_timeout_seconds

        if self.settings.mail_use_ssl:
            return smtplib.SMTP_SSL(
                host, port, timeout=timeout, context=ssl.create_default_context()
            )
        return smtplib.SMTP(host, port, timeout=timeout)

    def _send_blocking(self, message: EmailMessage) -> None:
        with self._connect() as server:
            if not self.settings.mail_use_ssl:
                server.ehlo()
                if server.has_extn("starttls"):
                    server.starttls(context=ssl.create_default_context())
                    server.ehlo()
            server.login(self.settings.mail_user, self.settings.mail_pass)
            server.send_message(message)

    async def send(self, recipient: str, subject: str, html: str) -> None:
        if not self.settings.mail_configured:
            logger.error("SMTP settings incomplete: MAIL_HOST, MAIL_PORT, MAIL_USER, MAIL_PASS required")
            raise ConfigurationError("Email configuration not complete")

        message = self._build_message(recipient, subject, html)

        try:
            await asyncio.to_thread(self._send_blocking, message)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"SMTP send to {recipient} via {self.settings.mail_host} failed: {e}")
            raise DeliveryError("Failed to send email") from e
