"""FastAPI dependency injection providers."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from loreexplorer.config import get_settings
from loreexplorer.infrastructure.database import get_session_factory
from loreexplorer.infrastructure.generation import GenerationService
from loreexplorer.repositories.location_repo import LocationStore
from loreexplorer.services.actions import LocationActions
from loreexplorer.services.explorer import Explorer
from loreexplorer.services.storyteller import StoryGenerator
from loreexplorer.services.summarizer import LocationSummarizer


def get_location_store() -> LocationStore:
    """Provide LocationStore instance."""
    return LocationStore(get_session_factory())


@lru_cache
def get_generation_service() -> GenerationService:
    """Provide the shared GenerationService, reusing one OpenAI client."""
    return GenerationService(get_settings())


LocationStoreDep = Annotated[LocationStore, Depends(get_location_store)]
GenerationDep = Annotated[GenerationService, Depends(get_generation_service)]


def get_location_actions(
    generation: GenerationDep,
    store: LocationStoreDep,
) -> LocationActions:
    """Provide LocationActions instance."""
    return LocationActions(
        storyteller=StoryGenerator(generation),
        summarizer=LocationSummarizer(generation),
        store=store,
    )


ActionsDep = Annotated[LocationActions, Depends(get_location_actions)]


async def get_explorer(actions: ActionsDep, store: LocationStoreDep) -> Explorer:
    """Provide an Explorer with saved locations already loaded."""
    explorer = Explorer(actions=actions, store=store)
    await explorer.refresh()
    return explorer


ExplorerDep = Annotated[Explorer, Depends(get_explorer)]
