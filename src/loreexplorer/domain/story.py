"""Story domain entity."""

from dataclasses import dataclass


@dataclass
class Story:
    """A titled narrative generated for a location. Never persisted."""

    title: str
    story: str

    @property
    def paragraphs(self) -> list[str]:
        """Split the story body into non-empty paragraphs."""
        return [p.strip() for p in self.story.split("\n\n") if p.strip()]
