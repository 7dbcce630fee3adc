"""
Data models and type definitions for morningpost.
"""

from dataclasses import dataclass

from .config import HN_API_BASE_URL, REQUEST_TIMEOUT, DEFAULT_USER_AGENT


@dataclass(frozen=True)
class Story:
    """Represents a Hacker News story item."""
    title: str = ""
    url: str = ""


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for an API client."""
    base_url: str = HN_API_BASE_URL
    timeout: float = REQUEST_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
