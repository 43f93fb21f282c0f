"""Generative model client for order interpretation."""
import logging
from typing import Optional
from openai import AsyncOpenAI, OpenAIError

logger = logging.getLogger(__name__)


class OrderModelError(Exception):
    """Base class for model-tier failures."""


class ModelNotConfiguredError(OrderModelError):
    """No model credential is configured."""


class ModelTransportError(OrderModelError):
    """The provider call failed or returned nothing."""


class ModelOutputError(OrderModelError):
    """The model returned text that does not match the order schema."""

    def __init__(self, message: str, raw_text: str):
        super().__init__(message)
        self.raw_text = raw_text


class OrderModelClient:
    """Thin wrapper around the OpenAI chat completions API.

    A single attempt is made per call; the SDK's own retries are disabled
    so a failing provider degrades to the fallback interpreter quickly.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gpt-4o-mini",
        temperature: float = 0.3,
        max_output_tokens: int = 1024,
        timeout: float = 20.0,
        base_url: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.timeout = timeout
        if client is None and api_key:
            client = AsyncOpenAI(
                api_key=api_key,
                base_url=base_url,
                timeout=timeout,
                max_retries=0,
            )
        self.client = client

    async def generate(self, prompt: str) -> str:
        """
        Request a JSON completion for the prompt.

        Raises:
            ModelNotConfiguredError: no credential configured
            ModelTransportError: provider or network failure, or empty output
        """
        if self.client is None:
            raise ModelNotConfiguredError("Missing OPENAI_API_KEY")

        logger.debug(f"[LLM] Requesting completion - model: {self.model}, prompt: {len(prompt)} chars")
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.temperature,
                max_tokens=self.max_output_tokens,
                response_format={"type": "json_object"},
            )
        except OpenAIError as e:
            raise ModelTransportError(f"{type(e).__name__}: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise ModelTransportError("Model returned an empty completion")
        return content
