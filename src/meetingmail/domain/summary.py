"""Summary record domain entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SummaryRecord:
    """Represents a generated meeting summary and the transcript it came from."""

    id: str
    transcript: str
    custom_instruction: str | None
    summary: str
    created_at: datetime
