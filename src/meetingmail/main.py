"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.responses import JSONResponse

from meetingmail.api.errors import register_exception_handlers
from meetingmail.api.router import router as api_router
from meetingmail.config import Settings, get_settings
from meetingmail.infrastructure.completion_client import (
    CompletionProvider,
    OpenAICompatibleProvider,
)
from meetingmail.infrastructure.smtp_transport import MailTransport, SMTPMailTransport
from meetingmail.repositories.summary_repo import (
    InMemorySummaryRepository,
    SummaryRepository,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings: Settings = app.state.settings

    logger.info("Starting MeetingMail application...")
    logger.info(f"Environment: {settings.environment}")
    if not settings.completion_configured:
        logger.warning("GROQ_API_KEY not configured; summary generation will fail")
    if not settings.mail_configured:
        logger.warning("SMTP settings incomplete; sending email will fail")

    yield

    provider = app.state.completion_provider
    if isinstance(provider, OpenAICompatibleProvider):
        await provider.close()
    logger.info("Shutting down MeetingMail application...")


def create_app(
    settings: Settings | None = None,
    *,
    summary_repo: SummaryRepository | None = None,
    completion_provider: CompletionProvider | None = None,
    mail_transport: MailTransport | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Collaborators default to the in-memory store, the OpenAI-compatible
    completion client and the SMTP transport built from settings.
    """
    settings = settings or get_settings()

    docs_kwargs = {}
    if settings.is_production:
        docs_kwargs = {"docs_url": None, "redoc_url": None, "openapi_url": None}

    app = FastAPI(
        title="MeetingMail",
        description="AI-generated meeting summaries, edited in the browser and sent by email",
        version="0.1.0",
        lifespan=lifespan,
        **docs_kwargs,
    )

    app.state.settings = settings
    app.state.summary_repo = (
        summary_repo if summary_repo is not None else InMemorySummaryRepository()
    )
    app.state.completion_provider = (
        completion_provider
        if completion_provider is not None
        else OpenAICompatibleProvider(settings)
    )
    app.state.mail_transport = (
        mail_transport if mail_transport is not None else SMTPMailTransport(settings)
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/health")
    async def health_check() -> JSONResponse:
        """Report which external services are configured. No network I/O."""
        return JSONResponse(
            {
                "status": "healthy",
                "completion": "configured" if settings.completion_configured else "missing",
                "mail": "configured" if settings.mail_configured else "missing",
            }
        )

    return app


# Create app instance
app = create_app()


def run() -> None:
    """Serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run("meetingmail.main:app", host=settings.host, port=settings.port)
