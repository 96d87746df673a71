"""Test doubles and canned model output."""

from unittest.mock import AsyncMock

from pydantic import BaseModel

from loreexplorer.domain.errors import GenerationFailure

EIFFEL_STORY = {
    "title": "The Iron Lady's Secret",
    "story": (
        "In 1889 Gustave Eiffel unveiled a tower that Paris had called monstrous.\n\n"
        "Legend says Eiffel kept a private apartment near the summit, where he "
        "entertained Thomas Edison."
    ),
}
EIFFEL_SUMMARY = {
    "summary": "Wrought-iron lattice tower built for the 1889 World's Fair, now a symbol of France."
}


class FakeGeneration:
    """Stand-in for GenerationService returning canned payloads per output shape."""

    def __init__(self, payloads: dict[str, dict] | None = None) -> None:
        if payloads is None:
            payloads = {"StoryOutput": EIFFEL_STORY, "SummaryOutput": EIFFEL_SUMMARY}
        self.payloads = payloads
        self.prompts: list[str] = []
        self.invoke = AsyncMock(side_effect=self._invoke)

    async def _invoke(self, prompt: str, output_shape: type[BaseModel]) -> BaseModel:
        self.prompts.append(prompt)
        payload = self.payloads.get(output_shape.__name__)
        if payload is None:
            raise GenerationFailure(f"No canned output for {output_shape.__name__}")
        return output_shape(**payload)
