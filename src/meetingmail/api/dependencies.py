"""FastAPI dependency injection providers."""

from typing import Annotated

from fastapi import Depends, Request

from meetingmail.config import Settings
from meetingmail.repositories.summary_repo import SummaryRepository
from meetingmail.services.mailer import EmailService
from meetingmail.services.summarizer import SummaryService


def get_app_settings(request: Request) -> Settings:
    """Provide the settings the app was created with."""
    return request.app.state.settings


def get_summary_repository(request: Request) -> SummaryRepository:
    """Provide the app's summary repository."""
    return request.app.state.summary_repo


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
SummaryRepoDep = Annotated[SummaryRepository, Depends(get_summary_repository)]


def get_summary_service(
    request: Request,
    repository: SummaryRepoDep,
    settings: SettingsDep,
) -> SummaryService:
    """Provide SummaryService instance."""
    return SummaryService(
        provider=request.app.state.completion_provider,
        repository=repository,
        settings=settings,
    )


def get_email_service(request: Request) -> EmailService:
    """Provide EmailService instance."""
    return EmailService(transport=request.app.state.mail_transport)


# Type aliases for commonly used dependencies
SummaryServiceDep = Annotated[SummaryService, Depends(get_summary_service)]
EmailServiceDep = Annotated[EmailService, Depends(get_email_service)]
