"""Summary API endpoints."""

from pathlib import PurePath

from fastapi import APIRouter, File, Form, HTTPException, UploadFile

from meetingmail.api.dependencies import SettingsDep, SummaryRepoDep, SummaryServiceDep
from meetingmail.api.schemas import (
    GenerateSummaryRequest,
    GenerateSummaryResponse,
    MessageResponse,
    SummaryDetailResponse,
)
from meetingmail.errors import ValidationError

router = APIRouter(tags=["summaries"])

TRANSCRIPT_EXTENSIONS = {".txt", ".md", ".vtt", ".srt"}


def decode_transcript(filename: str | None, content: bytes, max_bytes: int) -> str:
    """Validate an uploaded transcript file and return its text."""
    suffix = PurePath(filename or "").suffix.lower()
    if suffix not in TRANSCRIPT_EXTENSIONS:
        allowed = ", ".join(sorted(TRANSCRIPT_EXTENSIONS))
        raise ValidationError(f"Unsupported file type, expected one of: {allowed}")

    if len(content) > max_bytes:
        raise ValidationError(
            f"File size must be less than {max_bytes // (1024 * 1024)}MB"
        )

    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ValidationError("Transcript file must be UTF-8 text") from e

    if not text.strip():
        raise ValidationError("Transcript is required")
    return text


@router.post("/generate-summary", response_model=GenerateSummaryResponse)
async def generate_summary(
    request: GenerateSummaryRequest,
    service: SummaryServiceDep,
) -> GenerateSummaryResponse:
    """Generate an HTML summary for a pasted transcript."""
    record = await service.generate(request.transcript, request.custom_instruction)
    return GenerateSummaryResponse(id=record.id, summary=record.summary)


@router.post("/generate-summary/upload", response_model=GenerateSummaryResponse)
async def generate_summary_from_file(
    service: SummaryServiceDep,
    settings: SettingsDep,
    file: UploadFile = File(...),
    custom_instruction: str | None = Form(None, alias="customInstruction"),
) -> GenerateSummaryResponse:
    """Generate an HTML summary for an uploaded transcript file."""
    content = await file.read(settings.max_upload_bytes + 1)
    transcript = decode_transcript(file.filename, content, settings.max_upload_bytes)

    record = await service.generate(transcript, custom_instruction)
    return GenerateSummaryResponse(id=record.id, summary=record.summary)


@router.get(
    "/summaries/{summary_id}",
    response_model=SummaryDetailResponse,
    responses={404: {"model": MessageResponse}},
)
async def get_summary(
    summary_id: str,
    summary_repo: SummaryRepoDep,
) -> SummaryDetailResponse:
    """Get a stored summary record by ID."""
    record = summary_repo.get(summary_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Summary not found")
    return SummaryDetailResponse(
        id=record.id,
        transcript=record.transcript,
        custom_instruction=record.custom_instruction,
        summary=record.summary,
        created_at=record.created_at,
    )
