"""Meeting summary generation service."""

import logging

from meetingmail.config import Settings
from meetingmail.domain.summary import SummaryRecord
from meetingmail.infrastructure.completion_client import ChatMessage, CompletionProvider
from meetingmail.repositories.summary_repo import SummaryRepository

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an AI assistant that creates clear, actionable meeting summaries. "
    "Format your response as HTML with proper headings, bullet points, and structure."
)

DEFAULT_DIRECTIVE = (
    "Please create a standard meeting summary with key decisions, action items, "
    "and next steps."
)

USER_PROMPT = """Please summarize this meeting transcript:

{transcript}

{directive}"""


def build_messages(transcript: str, custom_instruction: str | None = None) -> list[ChatMessage]:
    """Build the system + user prompt pair for a transcript."""
    if custom_instruction:
        directive = f"Additional instructions: {custom_instruction}"
    else:
        directive = DEFAULT_DIRECTIVE

    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {
            "role": "user",
            "content": USER_PROMPT.format(transcript=transcript, directive=directive),
        },
    ]


class SummaryService:
    """Generates HTML meeting summaries and records them."""

    def __init__(
        self,
        provider: CompletionProvider,
        repository: SummaryRepository,
        settings: Settings,
    ) -> None:
        self.provider = provider
        self.repository = repository
        self.temperature = settings.completion_temperature
        self.max_tokens = settings.completion_max_tokens

    async def generate(
        self, transcript: str, custom_instruction: str | None = None
    ) -> SummaryRecord:
        """Generate a summary for a transcript and store it.

        Nothing is stored when the provider call fails; ConfigurationError and
        UpstreamError propagate to the caller.
        """
        messages = build_messages(transcript, custom_instruction)
        summary = await self.provider.complete(
            messages,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

        record = self.repository.create(
            transcript=transcript,
            custom_instruction=custom_instruction,
            summary=summary,
        )
        logger.info(
            f"Generated summary {record.id} ({len(transcript)} transcript chars, "
            f"custom instruction: {'yes' if record.custom_instruction else 'no'})"
        )
        return record
