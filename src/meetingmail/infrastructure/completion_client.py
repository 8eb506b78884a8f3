"""Chat-completion provider client (OpenAI-compatible API)."""

import logging
from abc import ABC, abstractmethod

from openai import AsyncOpenAI, OpenAIError

from meetingmail.config import Settings
from meetingmail.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

ChatMessage = dict[str, str]


class CompletionProvider(ABC):
    """Turns a list of chat messages into generated text."""

    @abstractmethod
    async def complete(
        self,
        messages: list[ChatMessage],
        temperature: float,
        max_tokens: int,
    ) -> str:
        """Return the text of the first completion.

        Raises:
            ConfigurationError: provider credential is missing
            UpstreamError: the call failed or returned no text
        """


class OpenAICompatibleProvider(CompletionProvider):
    """Completion provider backed by the OpenAI SDK.

    Points at Groq's OpenAI-compatible endpoint by default. The SDK client is
    built lazily so a missing key fails before any network I/O.
    """

    def __init__(self, settings: Settings) -> None:
        self.api_key = settings.groq_api_key
        self.base_url = settings.completion_base_url
        self.model = settings.completion_model
        self.timeout = settings.completion_timeout_seconds
        self._client: AsyncOpenAI | None = None

    def _get_client(self) -> AsyncOpenAI:
        """Get or create the SDK client."""
        if not self.api_key:
            logger.error("GROQ_API_KEY not configured")
            raise ConfigurationError("GROQ_API_KEY not configured")
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._client

    async def complete(
        self,
        messages: list[ChatMessage],
        temperature: float,
        max_tokens: int,
    ) -> str:
        client = self._get_client()

        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except OpenAIError as e:
            logger.error(f"Completion API error: {e}")
            raise UpstreamError("Failed to generate summary") from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            logger.error(f"Completion API returned no content (model={self.model})")
            raise UpstreamError("No summary generated")
        return content

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.close()
            self._client = None
