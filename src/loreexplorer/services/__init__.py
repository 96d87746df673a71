"""Story generation, summarization, and the save/generate workflows."""

from loreexplorer.services.actions import LocationActions
from loreexplorer.services.explorer import Explorer, Notice, notice_for
from loreexplorer.services.storyteller import StoryGenerator
from loreexplorer.services.summarizer import LocationSummarizer

__all__ = [
    "StoryGenerator",
    "LocationSummarizer",
    "LocationActions",
    "Explorer",
    "Notice",
    "notice_for",
]
