"""Email API endpoints."""

from fastapi import APIRouter

from meetingmail.api.dependencies import EmailServiceDep
from meetingmail.api.schemas import MessageResponse, SendEmailRequest

router = APIRouter(tags=["email"])


@router.post("/send-email", response_model=MessageResponse)
async def send_email(
    request: SendEmailRequest,
    service: EmailServiceDep,
) -> MessageResponse:
    """Email a (possibly edited) summary with an optional note."""
    await service.send(
        recipient=request.recipient,
        subject=request.subject,
        summary_html=request.summary,
        message=request.message,
    )
    return MessageResponse(message="Email sent successfully")
