"""Presentation-side state shared by the JSON API and HTML views."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Literal, TypeVar

from loreexplorer.domain.location import SavedLocation
from loreexplorer.domain.result import Failure, Success
from loreexplorer.domain.story import Story
from loreexplorer.repositories.location_repo import LocationStore
from loreexplorer.services.actions import LocationActions

logger = logging.getLogger(__name__)

T = TypeVar("T")

SlotStatus = Literal["idle", "in_flight"]
Operation = Literal["generate", "save", "detect"]

ALREADY_SAVED_MESSAGE = "This location is already in your collection."
BUSY_MESSAGE = "Another request is still in progress."


@dataclass
class ActionSlot:
    """Tracks one user-triggered operation: idle -> in_flight -> idle.

    last_outcome keeps the terminal state of the most recent call.
    """

    name: str
    status: SlotStatus = "idle"
    last_outcome: Literal["success", "failure"] | None = None

    @property
    def in_flight(self) -> bool:
        return self.status == "in_flight"


@dataclass(frozen=True)
class Notice:
    """A transient toast shown after an action completes."""

    title: str
    description: str
    destructive: bool = False


@dataclass
class Explorer:
    """Holds the saved-location cache and serializes actions per slot.

    saved_locations is only replaced by refresh(), either on first load or
    after a successful save.
    """

    actions: LocationActions
    store: LocationStore
    saved_locations: list[SavedLocation] = field(default_factory=list)
    current_location: str | None = None
    current_story: Story | None = None
    generation: ActionSlot = field(default_factory=lambda: ActionSlot("generation"))
    saving: ActionSlot = field(default_factory=lambda: ActionSlot("saving"))

    async def refresh(self) -> list[SavedLocation]:
        """Reload saved locations from the store."""
        self.saved_locations = await self.store.list_locations()
        return self.saved_locations

    def is_saved(self, location: str) -> bool:
        """Check a location against the loaded list by exact name."""
        return any(loc.name == location for loc in self.saved_locations)

    async def generate(self, location: str) -> Success[Story] | Failure:
        """Generate a story and remember it as the current one."""
        result = await self._run(self.generation, lambda: self.actions.generate_story(location))
        if isinstance(result, Success):
            self.current_location = location
            self.current_story = result.value
        return result

    async def save(self, location: str) -> Success[SavedLocation] | Failure:
        """Save a location unless it is already in the loaded list."""
        if self.is_saved(location):
            logger.info(f"Skipping save of '{location}': already saved")
            return Failure("already_saved", ALREADY_SAVED_MESSAGE)

        result = await self._run(self.saving, lambda: self.actions.save_location(location))
        if isinstance(result, Success):
            await self.refresh()
        return result

    async def _run(
        self,
        slot: ActionSlot,
        action: Callable[[], Awaitable[Success[T] | Failure]],
    ) -> Success[T] | Failure:
        if slot.in_flight:
            return Failure("busy", BUSY_MESSAGE)

        slot.status = "in_flight"
        slot.last_outcome = "failure"
        try:
            result = await action()
            slot.last_outcome = "success" if isinstance(result, Success) else "failure"
            return result
        finally:
            slot.status = "idle"


def notice_for(result: Success | Failure, operation: Operation) -> Notice | None:
    """Map an action result to the toast the user should see."""
    if isinstance(result, Success):
        if operation == "save":
            return Notice(
                "Location Saved!",
                f'"{result.value.name}" has been added to your collection.',
            )
        if operation == "detect":
            return Notice("Location Detected", "Generating a story for your current location.")
        return None

    if result.kind == "already_saved":
        return Notice("Already Saved", result.message)
    if result.kind == "busy":
        return Notice("Please Wait", result.message)
    if operation == "save":
        return Notice("Save Failed", result.message, destructive=True)
    if result.kind == "validation":
        return Notice("No Location", "Please enter a location to get a story.", destructive=True)
    return Notice("Error", result.message, destructive=True)
