"""Orchestration of the generate-story and save-location workflows."""

import logging

from loreexplorer.domain.errors import GenerationFailure, StoreUnavailable
from loreexplorer.domain.location import SavedLocation
from loreexplorer.domain.result import Failure, Success
from loreexplorer.domain.story import Story
from loreexplorer.repositories.location_repo import LocationStore
from loreexplorer.services.storyteller import StoryGenerator
from loreexplorer.services.summarizer import LocationSummarizer

logger = logging.getLogger(__name__)

GENERATE_EMPTY_MESSAGE = "Please provide a location."
GENERATE_FAILED_MESSAGE = "Failed to generate story. Please try again."
SAVE_EMPTY_MESSAGE = "Invalid location to save."
SAVE_FAILED_MESSAGE = (
    "Failed to save location. Please make sure the location store is configured correctly."
)


class LocationActions:
    """Validates input, sequences external calls, and maps failures to messages.

    Both operations return a Success or Failure and never raise for
    validation, generation, or store-write errors.
    """

    def __init__(
        self,
        storyteller: StoryGenerator,
        summarizer: LocationSummarizer,
        store: LocationStore,
    ) -> None:
        self.storyteller = storyteller
        self.summarizer = summarizer
        self.store = store

    async def generate_story(self, location: str) -> Success[Story] | Failure:
        """Generate a story for a location."""
        if not location:
            return Failure("validation", GENERATE_EMPTY_MESSAGE)

        try:
            story = await self.storyteller.generate(location)
        except GenerationFailure as e:
            logger.error(f"Story generation failed for '{location}': {e}")
            return Failure("generation", GENERATE_FAILED_MESSAGE)

        return Success(story)

    async def save_location(self, location: str) -> Success[SavedLocation] | Failure:
        """Summarize a location and persist it.

        Summarize and persist run sequentially without retry. A failure in
        either step aborts the save.
        """
        if not location:
            return Failure("validation", SAVE_EMPTY_MESSAGE)

        try:
            summary = await self.summarizer.summarize(location)
        except GenerationFailure as e:
            logger.error(f"Summary failed while saving '{location}': {e}")
            return Failure("generation", SAVE_FAILED_MESSAGE)

        try:
            saved = await self.store.add_location(location, summary)
        except StoreUnavailable as e:
            logger.error(f"Store write failed while saving '{location}': {e}")
            return Failure("store_unavailable", SAVE_FAILED_MESSAGE)

        return Success(saved)
