import logging
from typing import Dict, List, Optional

from openai import AsyncOpenAI, OpenAIError

from ..core.config import settings
from ..core.exceptions import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_MAX_TOKENS = 700


class CompletionService:
    """Thin client for the hosted chat-completion provider (Groq, OpenAI-compatible API)."""

    def __init__(self, client: Optional[AsyncOpenAI] = None, model: Optional[str] = None):
        self.model = model or settings.completion_model
        self.client: Optional[AsyncOpenAI] = client or self._initialize_client()

    def _initialize_client(self) -> Optional[AsyncOpenAI]:
        if not settings.groq_api:
            logger.warning("[CompletionService] GROQ_API not configured. AI features disabled.")
            return None
        return AsyncOpenAI(
            base_url=settings.completion_base_url,
            api_key=settings.groq_api,
            max_retries=0,
        )

    async def _generate_chat_completion(self, messages: List[Dict[str, str]], max_tokens: int) -> str:
        if not self.client:
            raise UpstreamError("Completion provider is not configured")
        try:
            logger.debug(f"Making completion request with model: {self.model}")
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=max_tokens,
            )
        except OpenAIError as e:
            raise UpstreamError(f"Completion request failed: {e}") from e

        if not response.choices:
            raise UpstreamError("Completion response has no choices")
        content = response.choices[0].message.content
        if content is None:
            raise UpstreamError("Completion response has no message content")
        logger.debug(f"Completion received, length: {len(content)}")
        return content

    async def complete(self, prompt: str, max_tokens: int = DEFAULT_MAX_TOKENS) -> str:
        """Send a single user message and return the first choice's text."""
        messages = [{"role": "user", "content": prompt}]
        return await self._generate_chat_completion(messages, max_tokens)

    async def close(self):
        if self.client:
            await self.client.close()
            logger.info("Completion client closed")


completion_service = CompletionService()
