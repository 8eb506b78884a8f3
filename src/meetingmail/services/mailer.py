"""Summary email dispatch service."""

import logging

from meetingmail.infrastructure.smtp_transport import MailTransport

logger = logging.getLogger(__name__)


def compose_email_html(summary_html: str, message: str | None = None) -> str:
    """Prepend an optional plain-text note to the summary HTML.

    Line breaks in the note become <br> tags and an <hr> separates it from
    the summary. Neither part is escaped.
    """
    if not message:
        return summary_html
    note = message.replace("\r\n", "\n").replace("\n", "<br>")
    return f"<p>{note}</p><hr>{summary_html}"


class EmailService:
    """Sends a finished summary to a recipient."""

    def __init__(self, transport: MailTransport) -> None:
        self.transport = transport

    async def send(
        self,
        recipient: str,
        subject: str,
        summary_html: str,
        message: str | None = None,
    ) -> None:
        html = compose_email_html(summary_html, message)
        await self.transport.send(recipient=recipient, subject=subject, html=html)
        logger.info(f"Sent summary email to {recipient}")
