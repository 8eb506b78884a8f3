"""Storage for generated summary records."""

import threading
import uuid
from abc import ABC, abstractmethod
from datetime import UTC, datetime

from meetingmail.domain.summary import SummaryRecord


class SummaryRepository(ABC):
    """Create/read access to summary records. Records are never updated or deleted."""

    @abstractmethod
    def create(
        self,
        transcript: str,
        custom_instruction: str | None,
        summary: str,
    ) -> SummaryRecord:
        """Store a new record and return it."""

    @abstractmethod
    def get(self, record_id: str) -> SummaryRecord | None:
        """Get a record by id, or None if it does not exist."""


class InMemorySummaryRepository(SummaryRepository):
    """Process-lifetime record store. Everything is lost on restart."""

    def __init__(self) -> None:
        self._records: dict[str, SummaryRecord] = {}
        self._lock = threading.Lock()

    def create(
        self,
        transcript: str,
        custom_instruction: str | None,
        summary: str,
    ) -> SummaryRecord:
        record = SummaryRecord(
            id=str(uuid.uuid4()),
            transcript=transcript,
            custom_instruction=custom_instruction or None,
            summary=summary,
            created_at=datetime.now(UTC),
        )
        with self._lock:
            self._records[record.id] = record
        return record

    def get(self, record_id: str) -> SummaryRecord | None:
        with self._lock:
            return self._records.get(record_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
