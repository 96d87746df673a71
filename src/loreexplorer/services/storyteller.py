"""Story generation for a location."""

import logging

from pydantic import BaseModel, Field

from loreexplorer.domain.errors import GenerationFailure
from loreexplorer.domain.story import Story
from loreexplorer.infrastructure.generation import GenerationService

logger = logging.getLogger(__name__)


class StoryOutput(BaseModel):
    """Structured output for a location story."""

    title: str = Field(description="The title of the generated story.")
    story: str = Field(description="The generated story related to the location.")


STORY_PROMPT = """You are a storyteller who crafts engaging stories related to the given location.

Location: {location}

Please generate a story with a title that is relevant to the location.
The story should be a good length to read in one sitting, with multiple paragraphs.
Focus on historical events, local legends, or interesting facts about the location."""


class StoryGenerator:
    """Generates a titled, multi-paragraph story about a location."""

    def __init__(self, generation: GenerationService) -> None:
        self.generation = generation

    async def generate(self, location: str) -> Story:
        """Generate a story for a location.

        Raises:
            GenerationFailure: The model call failed or returned a blank title/story
        """
        output = await self.generation.invoke(
            STORY_PROMPT.format(location=location),
            StoryOutput,
        )

        title = output.title.strip()
        story = output.story.strip()
        if not title or not story:
            logger.error(f"Model returned an empty story for '{location}'")
            raise GenerationFailure("Model returned an empty title or story")

        return Story(title=title, story=story)
