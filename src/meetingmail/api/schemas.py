"""Pydantic schemas for API request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts and emits camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GenerateSummaryRequest(CamelModel):
    """Request schema for summary generation."""

    transcript: str
    custom_instruction: str | None = None

    @field_validator("transcript")
    @classmethod
    def transcript_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Transcript is required")
        return value


class GenerateSummaryResponse(BaseModel):
    """Response schema for a generated summary."""

    id: str
    summary: str


class SummaryDetailResponse(CamelModel):
    """Response schema for a stored summary record."""

    id: str
    transcript: str
    custom_instruction: str | None
    summary: str
    created_at: datetime


class SendEmailRequest(CamelModel):
    """Request schema for emailing a summary."""

    recipient: EmailStr
    subject: str
    message: str | None = None
    summary: str

    @field_validator("subject", "summary")
    @classmethod
    def not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value


class MessageResponse(BaseModel):
    """Plain message body, used for confirmations and errors."""

    message: str
