"""
Hacker News news source.

See https://github.com/HackerNews/API for details about the API.
"""

from typing import List, Optional

from ..config import (
    HN_NEWEST_STORIES_ENDPOINT,
    HN_ITEM_ENDPOINT,
    STORY_WINDOW,
    SUMMARY_HEADER,
)
from ..fetchers import APIClient
from ..logging_config import get_logger, log_performance
from ..models import ClientConfig, Story
from ..parsers import parse_newest_ids, parse_story
from .base import Summarizer


class HNClient(Summarizer):
    """Client for the Hacker News API that summarizes the newest stories."""

    def __init__(self, config: Optional[ClientConfig] = None, api_client: Optional[APIClient] = None):
        """
        Args:
            config: Connection settings for a new APIClient
            api_client: An existing client to use instead; it carries its
                own config, so passing both is an error
        """
        if config is not None and api_client is not None:
            raise ValueError("pass either config or api_client, not both")
        super().__init__()
        self.api_client = api_client or APIClient(config)
        self.config = self.api_client.config

    def newest_stories(self) -> List[int]:
        """Fetch the IDs of the newest stories, newest first."""
        ids = parse_newest_ids(self.api_client.get(HN_NEWEST_STORIES_ENDPOINT))
        self.logger.info(f"Fetched {len(ids)} newest story IDs")
        return ids

    def fetch_story(self, item_id: int) -> Story:
        """Fetch a single story item by ID."""
        story = parse_story(self.api_client.get(HN_ITEM_ENDPOINT.format(item_id)))
        self.logger.debug(f"Fetched story {item_id}: '{story.title[:50]}'")
        return story

    @log_performance(get_logger("HNClient.summary"), "Hacker News summary")
    def summary(self) -> str:
        """
        Summarize the newest stories as line-separated titles and URLs::

            Latest HackerNews Stories
            =========================

            Story Title 1
            http://story-title-1.com

        The first failing item fetch aborts the whole summary.
        """
        ids = self.newest_stories()[:STORY_WINDOW]
        stories = [self.fetch_story(item_id) for item_id in ids]
        return render_summary(stories)

    def close(self) -> None:
        self.api_client.close()


def render_summary(stories: List[Story]) -> str:
    """Render stories under the Hacker News summary header."""
    parts = [f"{SUMMARY_HEADER}\n{'=' * len(SUMMARY_HEADER)}\n\n"]
    for story in stories:
        parts.append(f"{story.title}\n{story.url}\n\n")
    return "".join(parts)
