"""Text generation capability and its Gemini implementation."""
from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Any

from gemini_proxy.common.config import DEFAULT_MODEL_ID

LOGGER = logging.getLogger("gemini_proxy.generator")

class GenerationError(RuntimeError):
    """Raised when the upstream model answers without usable text."""


class TextGenerator(ABC):
    """Turns a prompt string into model-generated text."""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        ...


class GeminiTextGenerator(TextGenerator):
    """Google Gemini via the google-genai SDK.

    The SDK client is built on first use and then shared by all requests.
    """

    def __init__(self, api_key: str | None, model: str = DEFAULT_MODEL_ID, client: Any = None) -> None:
        self.api_key = api_key
        self.model = model
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            from google import genai
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(self, prompt: str) -> str:
        client = self._get_client()
        LOGGER.info("Generating text via Gemini model=%s prompt_chars=%d", self.model, len(prompt))
        response = await client.aio.models.generate_content(model=self.model, contents=prompt)
        text = response.text
        if text is None:
            raise GenerationError("Model returned no text.")
        return text
