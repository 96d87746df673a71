"""OpenAI-backed generation service using the Responses API."""

import asyncio
import logging
from typing import TypeVar

from openai import AsyncOpenAI
from pydantic import BaseModel

from loreexplorer.config import Settings
from loreexplorer.domain.errors import GenerationFailure

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)


class GenerationService:
    """Turns a prompt and a declared output shape into structured output."""

    def __init__(self, settings: Settings, client: AsyncOpenAI | None = None) -> None:
        """Initialize the generation service.

        Args:
            settings: Application settings (API key, model, timeout)
            client: Optional pre-built OpenAI client
        """
        self.settings = settings
        self.model = settings.generation_model
        self.timeout = settings.generation_timeout_seconds
        self.client = client or AsyncOpenAI(api_key=settings.openai_api_key)

    async def close(self) -> None:
        """Close the underlying OpenAI HTTP client."""
        await self.client.close()

    async def invoke(self, prompt: str, output_shape: type[OutputT]) -> OutputT:
        """Send a prompt and parse the response into output_shape.

        Raises:
            GenerationFailure: API key missing, request failed or timed out,
                or the output did not match the shape
        """
        if not self.settings.openai_api_key:
            logger.warning("OpenAI API key not configured")
            raise GenerationFailure("OpenAI API key not configured")

        try:
            async with asyncio.timeout(self.timeout):
                response = await self.client.responses.parse(
                    model=self.model,
                    input=[{"role": "user", "content": prompt}],
                    text_format=output_shape,
                )
            return output_shape.model_validate_json(response.output_text)
        except Exception as e:
            logger.error(f"Generation failed for {output_shape.__name__}: {e!r}")
            raise GenerationFailure(str(e) or e.__class__.__name__) from e
