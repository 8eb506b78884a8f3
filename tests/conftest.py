"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from meetingmail.config import Settings
from meetingmail.errors import MeetingMailError
from meetingmail.infrastructure.completion_client import ChatMessage, CompletionProvider
from meetingmail.infrastructure.smtp_transport import MailTransport
from meetingmail.main import create_app
from meetingmail.repositories.summary_repo import InMemorySummaryRepository

SUMMARY_HTML = "<h2>Meeting Summary</h2><ul><li>Ship on Friday</li></ul>"


class FakeCompletionProvider(CompletionProvider):
    """Records prompts and returns a fixed reply (or raises a given error)."""

    def __init__(self, reply: str = SUMMARY_HTML, error: MeetingMailError | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    async def complete(
        self,
        messages: list[ChatMessage],
        temperature: float,
        max_tokens: int,
    ) -> str:
        self.calls.append(
            {"messages": messages, "temperature": temperature, "max_tokens": max_tokens}
        )
        if self.error:
            raise self.error
        return self.reply


class FakeMailTransport(MailTransport):
    """Records sent messages instead of talking to an SMTP relay."""

    def __init__(self, error: MeetingMailError | None = None) -> None:
        self.error = error
        self.sent: list[dict] = []

    async def send(self, recipient: str, subject: str, html: str) -> None:
        if self.error:
            raise self.error
        self.sent.append({"to": recipient, "subject": subject, "html": html})


def make_settings(**overrides) -> Settings:
    """Build Settings isolated from the developer's .env file."""
    values = {
        "groq_api_key": "test-key",
        "mail_host": "smtp.test.local",
        "mail_port": 587,
        "mail_user": "bot@acme.io",
        "mail_pass": "secret",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def summary_repo() -> InMemorySummaryRepository:
    return InMemorySummaryRepository()


@pytest.fixture
def completion_provider() -> FakeCompletionProvider:
    return FakeCompletionProvider()


@pytest.fixture
def mail_transport() -> FakeMailTransport:
    return FakeMailTransport()


@pytest.fixture
def app(settings, summary_repo, completion_provider, mail_transport) -> FastAPI:
    """App wired to in-memory fakes."""
    return create_app(
        settings,
        summary_repo=summary_repo,
        completion_provider=completion_provider,
        mail_transport=mail_transport,
    )


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
