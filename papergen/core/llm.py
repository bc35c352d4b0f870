"""
Chat-completion clients.

The pipeline only needs "messages in, text out". Clients are constructed
explicitly from settings and injected into the question service, so tests
can swap in a fake without touching the network.
"""

import asyncio
import logging
from typing import Dict, List, Optional

from groq import AsyncGroq
from openai import AsyncOpenAI

from papergen.core.config import Settings
from papergen.core.exceptions import LLMError

logger = logging.getLogger(__name__)

Message = Dict[str, str]


class CompletionClient:
    """
    Base class for text-completion clients.

    Subclasses implement `_create`, which performs the actual SDK call and
    returns the message content of the first choice.
    """

    provider = "base"

    def __init__(self, timeout: float = 60.0):
        self.timeout = timeout

    async def complete(
        self,
        messages: List[Message],
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 4000,
        top_p: float = 0.9,
    ) -> str:
        """
        Send a chat completion request and return the response text.

        Raises:
            LLMError: on SDK failure, timeout, or an empty completion
        """
        try:
            content = await asyncio.wait_for(
                self._create(messages, model, temperature, max_tokens, top_p),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"{self.provider} request timed out after {self.timeout}s")
            raise LLMError(f"LLM request timed out after {self.timeout} seconds") from e
        except LLMError:
            raise
        except Exception as e:
            logger.error(f"{self.provider} API error: {e}")
            raise LLMError(f"LLM request failed: {e}") from e

        if not content or not content.strip():
            logger.error(f"{self.provider} returned an empty completion")
            raise LLMError("No response from LLM API")

        logger.debug(f"Received {len(content)} characters from {self.provider} ({model})")
        return content

    async def _create(
        self,
        messages: List[Message],
        model: str,
        temperature: float,
        max_tokens: int,
        top_p: float,
    ) -> Optional[str]:
        raise NotImplementedError


class GroqCompletionClient(CompletionClient):
    """Completion client backed by the Groq API."""

    provider = "groq"

    def __init__(self, api_key: str, timeout: float = 60.0):
        super().__init__(timeout=timeout)
        self._client = AsyncGroq(api_key=api_key)
        logger.info("✅ Groq completion client initialized")

    async def _create(self, messages, model, temperature, max_tokens, top_p):
        response = await self._client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
            top_p=top_p,
        )
        if not response.choices:
            return None
        return response.choices[0].message.content


class OpenAICompletionClient(CompletionClient):
    """Completion client for OpenAI compatible endpoints (OpenAI, DeepSeek, Ollama, etc)."""

    provider = "openai"

    def __init__(self, api_key: str, base_url: Optional[str] = None, timeout: float = 60.0):
        super().__init__(timeout=timeout)
        self._client = AsyncOpenAI(api_key=api_key, base_url=base_url)
        logger.info(f"✅ OpenAI compatible completion client initialized ({base_url or 'default endpoint'})")

    async def _create(self, messages, model, temperature, max_tokens, top_p):
        response = await self._client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
            top_p=top_p,
        )
        if not response.choices:
            return None
        return response.choices[0].message.content


def create_completion_client(settings: Settings) -> CompletionClient:
    """
    Build the completion client selected by settings.LLM_PROVIDER.

    Raises:
        LLMError: if the provider is unknown or its API key is missing
    """
    provider = settings.LLM_PROVIDER.lower()

    if provider == "groq":
        if not settings.GROQ_API_KEY:
            raise LLMError("GROQ_API_KEY is not configured")
        return GroqCompletionClient(
            api_key=settings.GROQ_API_KEY.get_secret_value(),
            timeout=settings.LLM_TIMEOUT,
        )

    if provider == "openai":
        if not settings.OPENAI_API_KEY:
            raise LLMError("OPENAI_API_KEY is not configured")
        return OpenAICompletionClient(
            api_key=settings.OPENAI_API_KEY.get_secret_value(),
            base_url=settings.OPENAI_BASE_URL,
            timeout=settings.LLM_TIMEOUT,
        )

    raise LLMError(f"Unknown LLM provider: {settings.LLM_PROVIDER}")
