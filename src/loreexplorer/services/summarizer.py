"""Visitor-oriented location summaries."""

import logging

from pydantic import BaseModel, Field

from loreexplorer.domain.errors import GenerationFailure
from loreexplorer.infrastructure.generation import GenerationService

logger = logging.getLogger(__name__)


class SummaryOutput(BaseModel):
    """Structured output for a location summary."""

    summary: str = Field(
        description="A summary of the key historical and cultural details of the location."
    )


SUMMARY_PROMPT = """Summarize the key historical and cultural details of the following location: {location_name}. Provide a concise and informative summary. Focus on information that would be relevant to a visitor."""


class LocationSummarizer:
    """Produces a short factual summary of a location for saving."""

    def __init__(self, generation: GenerationService) -> None:
        self.generation = generation

    async def summarize(self, location_name: str) -> str:
        """Summarize a location by name."""
        output = await self.generation.invoke(
            SUMMARY_PROMPT.format(location_name=location_name),
            SummaryOutput,
        )

        summary = output.summary.strip()
        if not summary:
            logger.error(f"Model returned an empty summary for '{location_name}'")
            raise GenerationFailure("Model returned an empty summary")

        return summary
